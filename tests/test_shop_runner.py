from decimal import Decimal

import pytest

from cart_monitor.shop_runner import ShopRunner
from tests.fakes import FakeNode, FakePage, button, cart_row, count_label, product_card


CATALOG = {
    'lapte': [("Lapte Zuzu 1L", "6,49 lei", 649, "6,49Lei/L"), ("Lapte Napolact 1L", "7,99 lei", 799, "7,99Lei/L")],
    'paine': [("Pâine Albă", "3,20 lei", 320, "3,20Lei/buc")],
}


class FakeShop:
    """Sklep w pamięci: home → wyszukiwanie → listing → koszyk."""

    def __init__(self, catalog=CATALOG, add_works=True):
        self.catalog = catalog
        self.add_works = add_works
        self.cart = []
        self.search_box = FakeNode(
            matches={'#header-search-bar-input', 'input'},
            placeholder='Ce cauți?', role='searchbox', value='',
            on_press=self._on_search,
        )
        self.page = FakePage(url='about:blank')
        self.page.on_goto = self._on_goto

    def _header(self):
        cart_button = FakeNode(
            matches={'button'}, role='button', name='Coș',
            children=[FakeNode(matches={'svg'}), FakeNode(text=str(len(self.cart)))],
            on_click=self._render_cart,
        )
        return FakeNode(matches={'header'}, children=[self.search_box, cart_button])

    def _on_goto(self, page, url):
        consent = button('Accept toate')
        consent.on_click = lambda p: setattr(consent, 'visible', False)
        page.set_content(consent, self._header())

    def _on_search(self, page, key, node):
        if key != 'Enter':
            return
        cards = []
        for name, price_text, minor, unit in self.catalog.get(node.value, []):
            cards.append(product_card(name, price_text, on_add=self._adder(name, minor, unit)))
        page.url = f'https://shop.test/search?q={node.value}'
        page.set_content(self._header(), *cards)

    def _adder(self, name, minor, unit):
        def add(page):
            if self.add_works:
                self.cart.append((name, minor, unit))
        return add

    def _render_cart(self, page):
        rows = [cart_row(name, minor, unit=unit) for name, minor, unit in self.cart]
        promos = [cart_row("Mega Promotia Saptamanii Cafea", 1999, code=77777, unit="25,00Lei/Kg", quantity=None)]
        computed = sum(minor for _, minor, _ in self.cart)
        totals = []
        if self.cart:
            amount = f'{computed // 100},{computed % 100:02d} lei'
            totals = [
                FakeNode(matches={'[class*="total"]'}, text=amount),
                FakeNode(matches={'[class*="total"]'}, text=amount),
            ]
        page.url = 'https://shop.test/cart'
        page.set_content(
            self._header(),
            count_label(len(self.cart)),
            FakeNode(matches={'ul'}, children=rows + promos),
            *totals,
        )


@pytest.fixture
def shop():
    return FakeShop()


async def test_full_add_to_cart_flow(shop, context):
    result = await ShopRunner(shop.page, context).run()

    assert result.success
    assert result.stopped_at is None
    assert result.alerts == []
    assert [p.name for p in result.run_data.products] == ["Lapte Zuzu 1L", "Pâine Albă"]
    assert [i.name for i in result.run_data.cart.line_items] == ["Lapte Zuzu 1L", "Pâine Albă"]
    assert result.run_data.cart.displayed_total == Decimal("9.69")
    assert result.run_data.cart.computed_total == Decimal("9.69")


async def test_stage_screenshots_are_recorded(shop, context):
    result = await ShopRunner(shop.page, context, screenshot_dir="shots").run()

    assert result.screenshots == {
        'home': 'shots/home.png',
        'listing1': 'shots/listing1.png',
        'listing2': 'shots/listing2.png',
        'cart': 'shots/cart.png',
    }


async def test_search_without_results_is_an_unexpected_stop(context):
    shop = FakeShop(catalog={'lapte': CATALOG['lapte']})

    result = await ShopRunner(shop.page, context, screenshot_dir="shots").run()

    assert not result.success
    assert result.stopped_at == 'listing2'
    assert '"paine"' in result.error
    assert 'shots/failed_listing2.png' in shop.page.screenshots
    assert len(result.run_data.products) == 1


async def test_empty_cart_is_an_expected_stop(context):
    shop = FakeShop(add_works=False)

    result = await ShopRunner(shop.page, context).run()

    assert result.success
    assert result.stopped_at == 'cart'
    assert [a.business_rule for a in result.alerts] == ['CART_EMPTY']


async def test_unexpected_exception_is_reported_with_stage(context):
    page = FakePage()

    def broken(p, url):
        raise RuntimeError("connection reset")
    page.on_goto = broken

    result = await ShopRunner(page, context).run()

    assert not result.success
    assert result.stopped_at == 'home'
    assert result.error == "connection reset"


async def test_home_without_search_box_stops_before_listing(context):
    page = FakePage(FakeNode(text="Site în mentenanță"))

    result = await ShopRunner(page, context).run()

    assert result.stopped_at == 'home'
    assert [a.business_rule for a in result.alerts] == ['HOME_NOT_LOADED']
    assert result.run_data.products == []
