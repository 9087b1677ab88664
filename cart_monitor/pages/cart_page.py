"""
Koszyk: pozycje, ilości, suma.

Struktura koszyka mega-image.ro: prawdziwe pozycje i kafelki promocji
("Mega Promotia Saptamanii") to te same <li> z obrazkiem i ceną jednostkową.
Pozycje koszyka są ZAWSZE pierwsze w DOM, więc licznik "N produse"
mówi, ile pierwszych wierszy brać. Licznik tylko przycina, nigdy nie dokłada.
"""
from dataclasses import dataclass, field
from decimal import Decimal
import logging
import re

from playwright.async_api import Locator, Error as PlaywrightError

from cart_monitor.core.errors import ParseError
from cart_monitor.core.price import parse_price
from cart_monitor.core.site_locale import SiteLocale, RON
from cart_monitor.pages.base_page import BasePage
from cart_monitor.pages.selectors import CartSelectors
from cart_monitor.run_data import CartLineItem, CartSummary

logger = logging.getLogger(__name__)

# Litery (także z diakrytykami) od początku tekstu, bez cyfr
NAME_PREFIX = re.compile(r'^([^\W\d_]+(?:\s+[^\W\d_]+)*)')


@dataclass
class RawCartRow:
    """Surowe dane jednego wiersza: zebrane z DOM, jeszcze nieocenione."""
    text: str
    name_candidates: list[str] = field(default_factory=list)
    quantity_value: str | None = None


# ── Reguły wyboru wierszy (bez przeglądarki) ────────────────────────────────

def limit_candidates(candidate_count: int, label_count: int | None, cap: int = 10) -> int:
    """Ile pierwszych wierszy przetwarzać."""
    if label_count is None:
        return min(candidate_count, cap)
    return min(candidate_count, label_count)


def parse_item_count(text: str | None, locale: SiteLocale = RON) -> int | None:
    match = locale.item_count_pattern.search((text or '').strip())
    return int(match.group(1)) if match else None


def name_from_text(text: str, fallback_length: int = 50) -> str:
    match = NAME_PREFIX.match(text)
    if match:
        return match.group(1).strip()
    return text[:fallback_length].strip()


def parse_quantity(value: str | None) -> int:
    digits = re.sub(r'\D', '', value or '')
    quantity = int(digits) if digits else 0
    return quantity if quantity > 0 else 1


def extract_line_total(text: str, locale: SiteLocale = RON) -> Decimal:
    """
    Kwota pozycji sklejona w tekście wiersza: "989Lei24085"
    → 989 bani + waluta + kod produktu → 9.89, "12999Lei24085" → 129.99.
    Cena jednostkowa ("Lei/Kg") nie pasuje, bo po walucie nie ma cyfr.
    """
    match = locale.line_total_pattern.search(text)
    if not match:
        return Decimal(0)
    return Decimal(match.group(1)) / locale.minor_units


def line_item_from_row(
    row: RawCartRow,
    locale: SiteLocale = RON,
    selectors: CartSelectors = CartSelectors(),
) -> CartLineItem | None:
    """Wiersz → pozycja koszyka albo None gdy to nie jest pozycja (szum)."""
    text = row.text.strip()
    if len(text) < selectors.min_row_text:
        return None

    name = next(
        (c.strip() for c in row.name_candidates if len(c.strip()) > selectors.min_name_length),
        '',
    )
    if not name:
        name = name_from_text(text, selectors.name_fallback_length)

    line_total = extract_line_total(text, locale)
    if not name or line_total <= 0:
        return None

    return CartLineItem(
        name=name,
        quantity=parse_quantity(row.quantity_value),
        line_total=line_total,
    )


# ── CartPage ──────────────────────────────────────────────────────────────────

class CartPage(BasePage):
    selectors_cls = CartSelectors

    LABEL_TIMEOUT = 2000

    async def open_cart_ui(self):
        s = self.selectors
        cart_button = (
            self.page.locator(s.cart_button)
            .filter(has=self.page.locator(s.cart_icon))
            .filter(has_text=s.cart_badge)
            .first
        )

        if await self.is_visible(cart_button):
            self.log("Klikam przycisk koszyka")
            await cart_button.click()
            await self.settle(2000)
        else:
            self.log(f"Brak przycisku koszyka — przechodzę na {s.checkout_path}")
            await self.page.goto(self.context.url(s.checkout_path))
            await self.settle(1000)

        self.log(f"URL koszyka: {self.page.url}")

    def line_items(self) -> Locator:
        # Łapie też promocje: przycinamy licznikiem w items()
        return (
            self.page.locator(self.selectors.line_item)
            .filter(has=self.page.locator(self.selectors.line_item_image))
            .filter(has_text=self.context.locale.unit_price_pattern)
        )

    async def item_count_label(self) -> int | None:
        """Liczba z etykiety "N produse" albo None gdy jej nie ma."""
        pattern = self.context.locale.item_count_pattern
        label = self.page.locator(self.selectors.item_count_label).filter(has_text=pattern).first
        try:
            text = await label.text_content(timeout=self.LABEL_TIMEOUT)
        except PlaywrightError:
            return None
        return parse_item_count(text, self.context.locale)

    async def _read_row(self, row: Locator) -> RawCartRow:
        text = await self.text_of(row)

        names = []
        for selector in self.selectors.name_selectors:
            element = row.locator(selector)
            if await element.count() > 0:
                names.append(await self.text_of(element.first))

        quantity_value = None
        quantity_input = row.get_by_role(self.selectors.quantity_role).first
        if await quantity_input.count() > 0:
            try:
                quantity_value = await quantity_input.input_value()
            except PlaywrightError:
                quantity_value = None

        return RawCartRow(text=text, name_candidates=names, quantity_value=quantity_value)

    async def items(self) -> list[CartLineItem]:
        rows = self.line_items()
        count = await rows.count()
        self.log(f"Znaleziono {count} potencjalnych pozycji koszyka")

        label_count = await self.item_count_label()
        limit = limit_candidates(count, label_count, self.selectors.default_cap)
        if limit < count:
            self.log(f"Biorę pierwsze {limit} (licznik: {label_count})")

        items = []
        for i in range(limit):
            try:
                row = await self._read_row(rows.nth(i))
            except PlaywrightError as e:
                logger.debug(f"Wiersz {i} nieczytelny: {e}")
                continue

            item = line_item_from_row(row, self.context.locale, self.selectors)
            if item is None:
                logger.debug(f"Wiersz {i} pominięty: {row.text[:40]!r}")
                continue
            items.append(item)

        return items

    async def total(self) -> Decimal:
        """
        Suma koszyka. Dla każdego selektora bierzemy OSTATNI element,
        suma końcowa jest renderowana po subtotalu i rabatach.
        """
        for selector in self.selectors.totals:
            elements = self.page.locator(selector)
            if await elements.count() == 0:
                continue

            try:
                total_text = await self.text_of(elements.last)
                total = parse_price(total_text, self.context.locale)
            except (ParseError, PlaywrightError):
                continue

            if total > 0:
                return total

        logger.warning("Nie znaleziono sumy koszyka — zwracam 0")
        return Decimal(0)

    async def read_cart(self) -> CartSummary:
        return CartSummary(line_items=await self.items(), displayed_total=await self.total())
