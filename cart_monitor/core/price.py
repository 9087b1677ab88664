from decimal import Decimal, InvalidOperation

from cart_monitor.core.errors import ParseError
from cart_monitor.core.site_locale import SiteLocale, RON


def parse_price(text: str | None, locale: SiteLocale = RON) -> Decimal:
    """
    Zamienia lokalny zapis ceny na Decimal.

        "1.234,56 lei" → 1234.56
        "12,34"        → 12.34
        "9 lei"        → 9

    Zostawia tylko cyfry i separatory, usuwa separatory tysięcy,
    pierwszy separator dziesiętny zamienia na kropkę.
    """
    cleaned = locale.strip_pattern.sub('', text or '')
    cleaned = cleaned.replace(locale.thousands_sep, '')
    cleaned = cleaned.replace(locale.decimal_sep, '.', 1)

    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ParseError(f'Nie można odczytać ceny z: "{text}"') from None


def format_price(amount: Decimal, locale: SiteLocale = RON) -> str:
    """Zapis kanoniczny w konwencji sklepu, bez separatora tysięcy: 1234,56"""
    return format(amount, 'f').replace('.', locale.decimal_sep)
