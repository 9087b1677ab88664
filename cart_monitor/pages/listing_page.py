from decimal import Decimal
from typing import AsyncIterator

from playwright.async_api import Locator, TimeoutError as PlaywrightTimeoutError

from cart_monitor.core.errors import ExtractionError, ElementNotFoundError, ParseError
from cart_monitor.core.overlays import dismiss_with_escape, dismiss_modal
from cart_monitor.core.price import parse_price
from cart_monitor.pages.base_page import BasePage
from cart_monitor.pages.home_page import HomePage
from cart_monitor.pages.selectors import ListingSelectors
from cart_monitor.run_data import ProductSummary

# ── ListingPage (wyniki wyszukiwania) ────────────────────────────────────────

class ListingPage(BasePage):
    selectors_cls = ListingSelectors

    async def search(self, term: str):
        # Wyszukiwarka jest w headerze: ta sama co na stronie głównej
        await HomePage(self.page, self.context).search(term)

    def product_cards(self) -> Locator:
        """Kontenery kart z tekstem waluty: odrzuca elementy layoutu bez ceny."""
        return self.page.locator(self.selectors.card_containers).filter(
            has_text=self.context.locale.currency_pattern
        )

    async def card_name(self, card: Locator) -> str:
        for selector in (self.selectors.name_primary, *self.selectors.name_fallbacks):
            element = card.locator(selector)
            if await element.count() > 0:
                name = await self.text_of(element.first)
                if name:
                    return name
        return ''

    async def card_price(self, card: Locator) -> Decimal:
        price_element = card.locator(self.selectors.price)
        if await price_element.count() == 0:
            raise ParseError("Brak ceny na karcie produktu")

        price_text = await self.text_of(price_element.first)
        try:
            return parse_price(price_text, self.context.locale)
        except ParseError as e:
            raise ParseError(f"Cena karty produktu: {e}") from e

    async def add_card_to_cart(self, card: Locator):
        # Drawer potrafi przykryć przycisk: Escape go zamyka
        drawer = self.page.locator(self.selectors.drawer_overlay).first
        if (await dismiss_with_escape(self.page, drawer)).found:
            self.log("Zamknięto drawer overlay")

        add_button = await self.resolve(
            self.selectors.add_to_cart, 'przycisk "Adauga in cos"', within=card
        )

        # force: nakładki są niestabilne, nie czekamy, aż znikną
        await add_button.click(force=True)
        await self.settle(1000)

        # Po dodaniu może wyskoczyć wybór dostawy
        delivery_modal = self.page.locator(self.selectors.delivery_modal).filter(
            has_text=self.selectors.delivery_text
        ).first
        close_button = self.page.get_by_role('button', name=self.selectors.modal_close).first

        outcome = await dismiss_modal(self.page, delivery_modal, close_button)
        if outcome.found:
            self.log(f"Modal dostawy: {outcome.value}")
            await self.settle(500)

    async def pick_and_add_first_visible(self) -> ProductSummary:
        """
        Bierze pierwszą kartę z listingu, odczytuje nazwę i cenę PRZED
        kliknięciem i dodaje do koszyka. Brak karty / ceny = błąd.
        """
        card = self.product_cards().first

        try:
            await card.wait_for(state='visible', timeout=self.context.expect_timeout)
        except PlaywrightTimeoutError:
            raise ElementNotFoundError('karta produktu na listingu', self.context.expect_timeout) from None

        name = await self.card_name(card)
        if not name:
            raise ExtractionError("Karta produktu bez nazwy")
        price = await self.card_price(card)

        await self.add_card_to_cart(card)

        self.log(f"Dodano: {name} — {price}")
        return ProductSummary(name=name, price=price)

    async def list_products(self) -> AsyncIterator[ProductSummary]:
        """Produkty z aktualnego DOM: każda karta czytana dopiero przy iteracji."""
        cards = self.product_cards()
        for i in range(await cards.count()):
            card = cards.nth(i)
            name = await self.card_name(card)
            if not name:
                continue
            try:
                price = await self.card_price(card)
            except ParseError as e:
                self.log(f"Pomijam '{name}': {e}")
                continue
            yield ProductSummary(name=name, price=price)
