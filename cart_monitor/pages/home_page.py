from cart_monitor.core.overlays import dismiss_overlays
from cart_monitor.pages.base_page import BasePage
from cart_monitor.pages.selectors import HomeSelectors
from cart_monitor.run_data import HomeData

# ── HomePage ──────────────────────────────────────────────────────────────────

class HomePage(BasePage):
    selectors_cls = HomeSelectors

    async def goto(self) -> HomeData:
        await self.page.goto(self.context.url('/'))
        await dismiss_overlays(self.page)
        await self.settle()

        # Bez wyszukiwarki w headerze reszta scenariusza nie ma sensu
        search_box = await self.try_resolve(self.selectors.search_box)
        if search_box is None:
            self.log("Brak wyszukiwarki na stronie głównej")
        return HomeData(loaded=search_box is not None)

    async def search(self, term: str):
        """Wpisuje frazę w wyszukiwarkę w headerze i zatwierdza Enterem."""
        search_box = await self.resolve(self.selectors.search_box, 'pole wyszukiwania')
        await search_box.fill(term)
        await search_box.press('Enter')
        self.log(f"Szukam: {term}")
        await self.settle()
