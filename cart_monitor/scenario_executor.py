"""
Scenario Executor: uruchamia pojedynczy scenariusz testowy.
Tworzy przeglądarkę, przekazuje stronę do ShopRunner i zamyka wszystko na końcu.
"""

import logging
from pathlib import Path

from playwright.async_api import async_playwright

from cart_monitor.config import Settings
from cart_monitor.context import ScenarioContext
from cart_monitor.shop_runner import ShopRunner, ShopRunResult

logger = logging.getLogger(__name__)


class ScenarioExecutor:
    """Wykonuje pojedynczy scenariusz testowy przez Playwright."""

    def __init__(self, settings: Settings, context: ScenarioContext | None = None):
        self.settings = settings
        self.context = context or ScenarioContext.from_settings(settings)

    async def run(self) -> ShopRunResult:
        logger.info(f"[{self.context.scenario_name}] Start @ {self.context.environment_url}")

        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=self.settings.headless)
            browser_context = await browser.new_context(
                base_url=self.settings.base_url,
                viewport=self.settings.viewport,
            )
            browser_context.set_default_timeout(self.settings.expect_timeout)
            page = await browser_context.new_page()

            try:
                screenshot_dir = None
                if self.settings.screenshot_dir:
                    screenshot_dir = f"{self.settings.screenshot_dir}/{self.context.scenario_name}"
                    Path(screenshot_dir).mkdir(parents=True, exist_ok=True)

                runner = ShopRunner(page=page, context=self.context, screenshot_dir=screenshot_dir)
                result = await runner.run()

            finally:
                await browser_context.close()
                await browser.close()

        logger.info(
            f"[{self.context.scenario_name}] Finished: {'success' if result.success else 'failed'} | "
            f"Stop: {result.stopped_at or '-'} | "
            f"Alerts: {len(result.alerts)}"
        )
        return result
