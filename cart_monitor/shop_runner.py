"""
ShopRunner: główny orkiestrator testu.
Odpowiedzialności:
  1. Uruchamia pages w odpowiedniej kolejności (home → wyszukiwanie/dodanie x N → koszyk)
  2. Obsługuje zatrzymanie testu (StopTest)
  3. Zbiera alerty ze wszystkich etapów
"""
import logging
from dataclasses import dataclass, field

from playwright.async_api import Page, Error as PlaywrightError

from cart_monitor.context import ScenarioContext
from cart_monitor.core.errors import ExtractionError
from cart_monitor.run_data import RunData
from cart_monitor.rules_result import AlertResult, RulesResult

from cart_monitor.pages import HomePage, ListingPage, CartPage, LoginPage
from cart_monitor.rules import HomeRules, ListingRules, CartRules

logger = logging.getLogger(__name__)


@dataclass
class ShopRunResult:
    run_data: RunData
    alerts: list[AlertResult] = field(default_factory=list)
    stopped_at: str | None = None
    success: bool = True
    error: str | None = None
    screenshots: dict[str, str] = field(default_factory=dict)  # stage → file path


class StopTest(Exception):
    """
    Rzucane gdy test ma się zatrzymać.
    expected=True  → stop był oczekiwany (reguła negatywna, np. pusty koszyk)
    expected=False → stop oznacza błąd (nie dało się odczytać wymaganego elementu)
    """
    def __init__(self, stage: str, reason: str, expected: bool = True):
        super().__init__(reason)
        self.stage = stage
        self.reason = reason
        self.expected = expected


class ShopRunner:
    def __init__(self, page: Page, context: ScenarioContext, screenshot_dir: str | None = None):
        self.page = page
        self.context = context
        self.run_data = RunData()
        self.alerts: list[AlertResult] = []
        self._current_stage = 'init'
        self.screenshot_dir = screenshot_dir
        self.screenshots: dict[str, str] = {}

    # ── Helpers ───────────────────────────────────────────────────────────────

    async def _screenshot(self, stage: str) -> None:
        if not self.screenshot_dir:
            return
        path = f"{self.screenshot_dir}/{stage}.png"
        try:
            await self.page.screenshot(path=path)
            self.screenshots[stage] = path
        except PlaywrightError as e:
            logger.debug(f"Screenshot '{stage}' nieudany: {e}")

    # ── Publiczne API ─────────────────────────────────────────────────────────

    async def run(self) -> ShopRunResult:
        try:
            await self._run_home()

            if self.context.should_login:
                await self._run_login()

            for index, term in enumerate(self.context.search_terms, start=1):
                await self._run_listing(index, term)

            await self._run_cart()

        except StopTest as e:
            if e.expected:
                logger.info(
                    f"[{self.context.scenario_name}] "
                    f"Test zatrzymany na '{e.stage}': {e.reason}"
                )
            else:
                logger.warning(
                    f"[{self.context.scenario_name}] "
                    f"Test przerwany na '{e.stage}' (nieoczekiwane): {e.reason}"
                )
                await self._screenshot(f"failed_{e.stage}")
            return self._result(stopped_at=e.stage, success=e.expected, error=None if e.expected else e.reason)

        except Exception as e:
            logger.exception(f"[{self.context.scenario_name}] Nieoczekiwany błąd na '{self._current_stage}': {e}")
            await self._screenshot(f"failed_{self._current_stage}")
            return self._result(stopped_at=self._current_stage, success=False, error=str(e))

        return self._result(success=True)

    def _result(self, success: bool, stopped_at: str | None = None, error: str | None = None) -> ShopRunResult:
        return ShopRunResult(
            run_data=self.run_data,
            alerts=self.alerts,
            stopped_at=stopped_at,
            success=success,
            error=error,
            screenshots=self.screenshots,
        )

    # ── Etapy ─────────────────────────────────────────────────────────────────

    async def _run_home(self):
        self._current_stage = 'home'
        self.run_data.home = await HomePage(self.page, self.context).goto()
        await self._screenshot('home')
        self._process_result(HomeRules(self.context).check(self.run_data), 'home')

    async def _run_login(self):
        self._current_stage = 'login'
        try:
            await LoginPage(self.page, self.context).login(self.context.email, self.context.password)
        except ExtractionError as e:
            raise StopTest('login', str(e), expected=False)
        await self._screenshot('login')

    async def _run_listing(self, index: int, term: str):
        stage = f'listing{index}'
        self._current_stage = stage

        listing = ListingPage(self.page, self.context)
        await listing.search(term)

        try:
            product = await listing.pick_and_add_first_visible()
        except ExtractionError as e:
            raise StopTest(stage, f'"{term}": {e}', expected=False)

        self.run_data.products.append(product)
        await self._screenshot(stage)
        self._process_result(ListingRules(self.context).check(self.run_data), stage)

    async def _run_cart(self):
        self._current_stage = 'cart'
        cart = CartPage(self.page, self.context)
        await cart.open_cart_ui()
        self.run_data.cart = await cart.read_cart()

        for i, item in enumerate(self.run_data.cart.line_items, start=1):
            logger.info(f"  Pozycja {i}: {item.name} | ilość {item.quantity} | {item.line_total}")
        logger.info(f"  Suma koszyka: {self.run_data.cart.displayed_total}")

        await self._screenshot('cart')
        self._process_result(CartRules(self.context).check(self.run_data), 'cart')

    def _process_result(self, result: RulesResult, stage: str):
        """
        Przetwarza wynik rules:
        - Zapisuje alerty
        - Rzuca StopTest jeśli rules zdecydowały o zatrzymaniu
        """
        for alert in result.alerts:
            logger.warning(f"[{stage}] ALERT: {alert.business_rule} — {alert.description}")
        self.alerts.extend(result.alerts)

        if result.should_stop:
            raise StopTest(stage=stage, reason=result.stop_reason, expected=True)
