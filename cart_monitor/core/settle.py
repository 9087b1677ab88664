import logging

from playwright.async_api import Page, Error as PlaywrightError

logger = logging.getLogger(__name__)


async def settle(page: Page, ms: int = 250, network_idle_timeout: int = 3000) -> None:
    """
    Czeka, aż strona się uspokoi po nawigacji albo kliknięciu.

    domcontentloaded → networkidle (max network_idle_timeout) → stale ms.
    Brak networkidle to nie błąd: dynamiczne sklepy często nigdy
    nie przestają pytać serwera. Funkcja nigdy nie rzuca.
    """
    try:
        await page.wait_for_load_state('domcontentloaded')
    except PlaywrightError as e:
        logger.debug(f"domcontentloaded nie nastąpił: {e}")

    try:
        await page.wait_for_load_state('networkidle', timeout=network_idle_timeout)
    except PlaywrightError:
        logger.debug(f"Brak networkidle po {network_idle_timeout} ms — idziemy dalej")

    # Animacje / doładowanie komponentów JS
    try:
        await page.wait_for_timeout(ms)
    except PlaywrightError as e:
        logger.debug(f"Opóźnienie settle przerwane: {e}")
