"""
Zamykanie nakładek: zgoda na cookies, modal sklepu/dostawy, drawer.

ZASADA: nic tutaj nie przerywa testu. Każda próba kończy się jednym
z trzech wyników (DismissOutcome), który wołający może zignorować.
"""

import enum
import logging
import re
from dataclasses import dataclass

from playwright.async_api import Page, Locator, Error as PlaywrightError

logger = logging.getLogger(__name__)


class DismissOutcome(enum.Enum):
    ACTED = "acted"                  # znaleziono i zamknięto
    ACTION_FAILED = "action_failed"  # znaleziono, klik/klawisz nie przeszedł
    NOT_FOUND = "not_found"          # nie było czego zamykać

    @property
    def found(self) -> bool:
        return self is not DismissOutcome.NOT_FOUND


@dataclass(frozen=True)
class OverlayPatterns:
    consent: tuple[re.Pattern, ...] = (
        re.compile(r'accept', re.I),
        re.compile(r'sunt de acord', re.I),
        re.compile(r'de acord', re.I),
        re.compile(r'consimt', re.I),
        re.compile(r'acceptă', re.I),
        re.compile(r'accept all', re.I),
        re.compile(r'acceptă toate', re.I),
    )
    close: tuple[re.Pattern, ...] = (
        re.compile(r'închide', re.I),
        re.compile(r'close', re.I),
        re.compile(r'^ok$', re.I),
        re.compile(r'got it', re.I),
        re.compile(r'continua', re.I),
    )
    appear_delay: int = 500
    after_click_delay: int = 300
    click_timeout: int = 2000


# ── Helpers ───────────────────────────────────────────────────────────────────

async def _is_visible(locator: Locator) -> bool:
    try:
        return await locator.is_visible()
    except PlaywrightError:
        return False


async def _pause(page: Page, ms: int):
    try:
        await page.wait_for_timeout(ms)
    except PlaywrightError:
        pass


async def _click(locator: Locator, timeout: int) -> DismissOutcome:
    try:
        await locator.click(timeout=timeout)
    except PlaywrightError as e:
        logger.debug(f"Klik w nakładkę nie przeszedł: {e}")
        return DismissOutcome.ACTION_FAILED
    return DismissOutcome.ACTED


async def _press_escape(page: Page) -> DismissOutcome:
    try:
        await page.keyboard.press('Escape')
    except PlaywrightError as e:
        logger.debug(f"Escape nie przeszedł: {e}")
        return DismissOutcome.ACTION_FAILED
    return DismissOutcome.ACTED


async def try_click(locator: Locator, timeout: int = 2000) -> DismissOutcome:
    if not await _is_visible(locator):
        return DismissOutcome.NOT_FOUND
    return await _click(locator, timeout)


# ── Publiczne API ─────────────────────────────────────────────────────────────

async def dismiss_overlays(
    page: Page,
    patterns: OverlayPatterns | None = None,
) -> dict[str, DismissOutcome]:
    """
    Zamyka banner cookies i modal lokalizacji/sklepu.
    Jedno kliknięcie na kategorię: pierwszy widoczny przycisk wygrywa.
    Zwraca {kategoria: wynik}, nigdy nie rzuca.
    """
    patterns = patterns or OverlayPatterns()
    await _pause(page, patterns.appear_delay)

    outcomes = {}
    for category, category_patterns in (('consent', patterns.consent), ('close', patterns.close)):
        outcome = DismissOutcome.NOT_FOUND
        for pattern in category_patterns:
            button = page.get_by_role('button', name=pattern).first
            outcome = await try_click(button, patterns.click_timeout)
            if outcome.found:
                logger.info(f"Nakładka '{category}': {pattern.pattern} → {outcome.value}")
                await _pause(page, patterns.after_click_delay)
                break
        outcomes[category] = outcome

    return outcomes


async def dismiss_with_escape(page: Page, overlay: Locator, delay: int = 500) -> DismissOutcome:
    """Jeśli overlay jest widoczny: Escape i chwila na animacje."""
    if not await _is_visible(overlay):
        return DismissOutcome.NOT_FOUND

    outcome = await _press_escape(page)
    await _pause(page, delay)
    return outcome


async def dismiss_modal(
    page: Page,
    modal: Locator,
    close_button: Locator,
    click_timeout: int = 2000,
) -> DismissOutcome:
    """Modal widoczny → przycisk zamknięcia, a jak go nie ma to Escape."""
    if not await _is_visible(modal):
        return DismissOutcome.NOT_FOUND

    if await _is_visible(close_button):
        return await _click(close_button, click_timeout)
    return await _press_escape(page)
