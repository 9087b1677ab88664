from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from cart_monitor.core.errors import ExtractionError
from cart_monitor.core.overlays import dismiss_overlays
from cart_monitor.pages.base_page import BasePage
from cart_monitor.pages.selectors import LoginSelectors

# ── LoginPage ─────────────────────────────────────────────────────────────────

class LoginPage(BasePage):
    selectors_cls = LoginSelectors

    async def login(self, email: str, password: str):
        login_path = self.selectors.login_path
        self.log(f"Loguję jako: {email}")

        await self.page.goto(self.context.url(login_path))
        await dismiss_overlays(self.page)
        await self.settle()

        username = await self.resolve(self.selectors.username, 'pole email')
        await username.fill(email)

        password_input = await self.resolve(self.selectors.password, 'pole hasła')
        await password_input.fill(password)

        # Enter w polu hasła jest pewniejszy niż przycisk
        await password_input.press('Enter')
        await self.page.wait_for_timeout(1000)

        if login_path in self.page.url:
            submit = await self.resolve(self.selectors.submit, 'przycisk logowania')
            # force: przycisk bywa przykryty nakładką
            await submit.click(force=True)

        await self.settle(1500)

        try:
            await self.page.wait_for_url(
                lambda url: login_path not in url,
                timeout=self.context.expect_timeout,
            )
        except PlaywrightTimeoutError:
            raise ExtractionError(f"Logowanie nieudane — nadal na {self.page.url}") from None

        self.log("Zalogowano")
