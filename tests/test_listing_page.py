from decimal import Decimal

import pytest

from cart_monitor.core.errors import ElementNotFoundError, ExtractionError, ParseError
from cart_monitor.pages.listing_page import ListingPage
from cart_monitor.run_data import ProductSummary
from tests.fakes import FakeNode, button, product_card


def add_button_of(card):
    return card.children[-1]


async def test_product_cards_require_currency_text(page, context):
    page.set_content(
        FakeNode(matches={'article'}, text="Reteta saptamanii"),
        product_card("Lapte Zuzu 1L", "6,49 lei"),
    )

    assert await ListingPage(page, context).product_cards().count() == 1


async def test_card_name_prefers_styled_title_then_falls_back(page, context):
    page.set_content(
        product_card("Lapte Zuzu 1L", "6,49 lei"),
        product_card("Pâine Albă", "3,20 lei", title_testid=False),
    )
    listing = ListingPage(page, context)
    cards = listing.product_cards()

    assert await listing.card_name(cards.nth(0)) == "Lapte Zuzu 1L"
    assert await listing.card_name(cards.nth(1)) == "Pâine Albă"


async def test_card_price_is_parsed(page, context):
    page.set_content(product_card("Unt 200g", "1.234,56 lei"))
    listing = ListingPage(page, context)

    assert await listing.card_price(listing.product_cards().first) == Decimal("1234.56")


async def test_card_price_failure_keeps_context(page, context):
    page.set_content(product_card("Unt 200g", "pret indisponibil lei"))
    listing = ListingPage(page, context)

    with pytest.raises(ParseError, match="Cena karty produktu"):
        await listing.card_price(listing.product_cards().first)


async def test_pick_and_add_first_visible(page, context):
    first = product_card("Lapte Zuzu 1L", "6,49 lei")
    second = product_card("Lapte Napolact 1L", "7,99 lei")
    page.set_content(first, second)

    product = await ListingPage(page, context).pick_and_add_first_visible()

    assert product == ProductSummary(name="Lapte Zuzu 1L", price=Decimal("6.49"))
    assert add_button_of(first).clicks == [{'force': True}]
    assert add_button_of(second).clicks == []
    # "Adauga in lista" stays untouched
    assert first.children[2].clicks == []


async def test_add_button_found_by_name_without_test_id(page, context):
    card = product_card("Pâine Albă", "3,20 lei", add_testid=False)
    page.set_content(card)

    await ListingPage(page, context).pick_and_add_first_visible()

    assert add_button_of(card).clicks == [{'force': True}]


async def test_no_visible_card_is_a_hard_failure(page, context):
    page.set_content(FakeNode(matches={'article'}, text="Nu am gasit produse"))

    with pytest.raises(ElementNotFoundError) as excinfo:
        await ListingPage(page, context).pick_and_add_first_visible()
    assert "karta produktu" in str(excinfo.value)


async def test_card_without_price_element_fails_before_click(page, context):
    card = product_card("Lapte Zuzu 1L", "6,49 lei")
    card.children[1].matches = {'span'}
    page.set_content(card)

    with pytest.raises(ParseError):
        await ListingPage(page, context).pick_and_add_first_visible()
    assert add_button_of(card).clicks == []


async def test_card_without_name_fails(page, context):
    card = product_card("", "6,49 lei")
    page.set_content(card)

    with pytest.raises(ExtractionError, match="bez nazwy"):
        await ListingPage(page, context).pick_and_add_first_visible()


async def test_drawer_overlay_is_closed_with_escape_before_click(page, context):
    page.set_content(
        FakeNode(matches={'[data-testid="ecom-drawer-overlay"]'}),
        product_card("Lapte Zuzu 1L", "6,49 lei"),
    )

    await ListingPage(page, context).pick_and_add_first_visible()

    assert page.keyboard.pressed == ['Escape']


async def test_delivery_modal_after_add_is_closed(page, context):
    close = button("Închide")

    def show_modal(p):
        p.add(FakeNode(matches={'[role="dialog"]'}, text="Alege metoda de livrare", children=[close]))

    page.set_content(product_card("Lapte Zuzu 1L", "6,49 lei", on_add=show_modal))

    product = await ListingPage(page, context).pick_and_add_first_visible()

    assert close.clicks == [{'force': False}]
    assert page.keyboard.pressed == []
    assert product.name == "Lapte Zuzu 1L"


async def test_delivery_modal_without_close_button_gets_escape(page, context):
    def show_modal(p):
        p.add(FakeNode(matches={'.modal'}, text="Livrare la domiciliu"))

    page.set_content(product_card("Lapte Zuzu 1L", "6,49 lei", on_add=show_modal))

    await ListingPage(page, context).pick_and_add_first_visible()

    assert page.keyboard.pressed == ['Escape']


async def test_list_products_skips_cards_without_usable_price(page, context):
    page.set_content(
        product_card("Lapte Zuzu 1L", "6,49 lei"),
        product_card("Lapte fara pret", "- lei"),
        product_card("Pâine Albă", "3,20 lei"),
    )

    products = [p async for p in ListingPage(page, context).list_products()]

    assert products == [
        ProductSummary(name="Lapte Zuzu 1L", price=Decimal("6.49")),
        ProductSummary(name="Pâine Albă", price=Decimal("3.20")),
    ]
