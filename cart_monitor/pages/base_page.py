from playwright.async_api import Page, Locator, Error as PlaywrightError
from cart_monitor.context import ScenarioContext
from cart_monitor.core.errors import ElementNotFoundError
from cart_monitor.core.settle import settle
import logging

logger = logging.getLogger(__name__)


class BasePage:
    """
    Klasa bazowa dla wszystkich Page Objects.
    Playwright jest TYLKO tutaj i w klasach dziedziczących.
    """

    # Klasa z selektorami: nadpisz w page
    selectors_cls = None

    POLL_INTERVAL = 250

    def __init__(self, page: Page, context: ScenarioContext, selectors=None):
        self.page = page
        self.context = context
        self.selectors = selectors or (self.selectors_cls() if self.selectors_cls else None)

    # ── Lokator ───────────────────────────────────────────────────────────────

    def loc(self, selector: tuple, within: Locator | None = None) -> Locator:
        """
        Interpretuje tuple selektora i zwraca Playwright Locator.
        within: szukaj wewnątrz innego lokatora (np. karty produktu).

        Formaty:
          ('locator',      'css_or_xpath')
          ('role',         'button',       {'name': 'Adauga'})
          ('text',         'Cos',          {'exact': True})
          ('test_id',      'product-block-add')
          ('label',        'Email')
          ('placeholder',  'Ce cauti?')
        """
        root = within if within is not None else self.page
        kind = selector[0]

        if kind == 'locator':
            return root.locator(selector[1])
        elif kind == 'role':
            kwargs = selector[2] if len(selector) > 2 else {}
            return root.get_by_role(selector[1], **kwargs)
        elif kind == 'text':
            kwargs = selector[2] if len(selector) > 2 else {}
            return root.get_by_text(selector[1], **kwargs)
        elif kind == 'test_id':
            return root.get_by_test_id(selector[1])
        elif kind == 'label':
            return root.get_by_label(selector[1])
        elif kind == 'placeholder':
            return root.get_by_placeholder(selector[1])
        else:
            raise ValueError(f"Nieznany typ selektora: {kind}")

    # ── Strategie ─────────────────────────────────────────────────────────────

    async def try_resolve(
        self,
        strategies: tuple,
        within: Locator | None = None,
        timeout: int | None = None,
    ) -> Locator | None:
        """
        Sprawdza strategie po kolei. Pierwsza, która ma widoczne dopasowanie
        wygrywa, zwraca jej pierwszy widoczny element, reszty nie pyta.
        Powtarza co POLL_INTERVAL aż do timeoutu. Brak → None.
        """
        timeout = self.context.expect_timeout if timeout is None else timeout
        attempts = max(1, timeout // self.POLL_INTERVAL)

        for attempt in range(attempts):
            for selector in strategies:
                match = await self._first_visible(self.loc(selector, within))
                if match is not None:
                    return match
            if attempt < attempts - 1:
                await self.page.wait_for_timeout(self.POLL_INTERVAL)

        return None

    async def resolve(
        self,
        strategies: tuple,
        target: str,
        within: Locator | None = None,
        timeout: int | None = None,
    ) -> Locator:
        """Jak try_resolve, ale brak elementu to błąd (element wymagany)."""
        timeout = self.context.expect_timeout if timeout is None else timeout
        match = await self.try_resolve(strategies, within=within, timeout=timeout)
        if match is None:
            raise ElementNotFoundError(target, timeout)
        return match

    async def _first_visible(self, locator: Locator) -> Locator | None:
        try:
            count = await locator.count()
        except PlaywrightError:
            return None

        for i in range(count):
            element = locator.nth(i)
            if await self.is_visible(element):
                return element
        return None

    # ── Helpers ───────────────────────────────────────────────────────────────

    async def settle(self, ms: int = 250):
        await settle(self.page, ms, network_idle_timeout=self.context.network_idle_timeout)

    async def text_of(self, locator: Locator) -> str:
        return (await locator.text_content() or '').strip()

    async def is_visible(self, selector: tuple | Locator) -> bool:
        el = self.loc(selector) if isinstance(selector, tuple) else selector
        try:
            return await el.is_visible()
        except PlaywrightError:
            return False

    def log(self, msg: str):
        logger.info(f"[{self.__class__.__name__}] {msg}")
