"""
Selektory mega-image.ro: jeden plik, jedna zmiana gdy sklep zmieni HTML.

Format selektora jak w BasePage.loc():
  ('locator',      'css')
  ('role',         'button', {'name': re.compile(...)})
  ('placeholder',  re.compile(...))

Krotka selektorów = lista strategii w kolejności priorytetu (BasePage.resolve).
Każdy page dostaje swoją klasę w konstruktorze, test albo inna wersja
sklepu może podmienić zestaw bez ruszania page objectów.
"""
from dataclasses import dataclass
import re


@dataclass(frozen=True)
class HomeSelectors:
    search_box: tuple = (
        ('locator',     '#header-search-bar-input'),
        ('placeholder', re.compile(r'ce cau[tț]i', re.I)),
        ('role',        'searchbox'),
        ('locator',     'input[type="search"]'),
        ('locator',     'input[placeholder*="search" i]'),
    )


@dataclass(frozen=True)
class ListingSelectors:
    card_containers: str = (
        '[data-testid*="product-card"], [data-testid*="product-item"], '
        'article, .product-card, .product-item, .product'
    )
    name_primary: str = 'h3[data-testid="styled-title"]'
    name_fallbacks: tuple[str, ...] = ('h3', 'h2', 'h4', '.name', '.product-title', '.product-name')
    price: str = '[data-testid*="price"], .price, .product-price, [class*="price"]'

    # Najpierw data-testid: obok jest przycisk "Adauga in lista" którego nie chcemy
    add_to_cart: tuple = (
        ('locator', '[data-testid="product-block-add"]'),
        ('role',    'button', {'name': re.compile(r'adaug[ăa]\s+(î|i)n\s+co[șs]', re.I)}),
    )

    drawer_overlay: str = '[data-testid="ecom-drawer-overlay"]'
    delivery_modal: str = '[role="dialog"], .modal, [class*="modal"]'
    delivery_text: re.Pattern = re.compile(r'livr|deliver', re.I)
    modal_close: re.Pattern = re.compile(r'închide|inchide|close|^x$', re.I)


@dataclass(frozen=True)
class CartSelectors:
    # Przycisk koszyka w headerze: ikona svg + badge z liczbą
    cart_button: str = 'button, a'
    cart_icon: str = 'svg'
    cart_badge: re.Pattern = re.compile(r'^\d+$')
    checkout_path: str = '/checkout'

    line_item: str = 'li'
    line_item_image: str = 'img'
    name_selectors: tuple[str, ...] = ('h3', 'h4', 'a', '[class*="name"]', '[class*="title"]')
    quantity_role: str = 'spinbutton'

    item_count_label: str = '*'

    # Kolejność ma znaczenie: pierwsza dodatnia suma wygrywa
    totals: tuple[str, ...] = (
        '[data-testid*="cart-total"]',
        '[data-testid*="total"]',
        '[class*="total"]',
        '.cart-total',
        '.summary-total',
        '.grand-total',
    )

    # Bez etykiety "N produse" nie bierzemy więcej niż tyle wierszy
    default_cap: int = 10
    min_row_text: int = 10
    min_name_length: int = 3
    name_fallback_length: int = 50


@dataclass(frozen=True)
class LoginSelectors:
    login_path: str = '/login'
    username: tuple = (
        ('locator', 'input[name="j_username"]'),
        ('locator', '#j_username'),
    )
    password: tuple = (
        ('locator', 'input[name="password"]'),
        ('locator', '#current-password'),
        ('locator', 'input[type="password"]'),
    )
    submit: tuple = (
        ('role',    'button', {'name': re.compile(r'autentificare|logare|conectare', re.I)}),
        ('locator', 'button[type="submit"]'),
    )
