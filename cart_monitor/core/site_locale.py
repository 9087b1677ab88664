"""
Konwencje lokalne sklepu: waluta, separatory, wzorce tekstowe.
Algorytmy koszyka i listingu nie znają waluty, dostają SiteLocale.
"""
from dataclasses import dataclass
import re


@dataclass(frozen=True)
class SiteLocale:
    currency_word: str = 'Lei'
    thousands_sep: str = '.'
    decimal_sep: str = ','
    # Ile jednostek drobnych w jednostce głównej (bani → lei)
    minor_units: int = 100

    # Tekst po którym rozpoznajemy kartę produktu na listingu
    currency_pattern: re.Pattern = re.compile(r'lei|RON', re.IGNORECASE)
    # Cena jednostkowa ("12,99 Lei/Kg"): mają ją tylko pozycje koszyka i promocje
    unit_price_pattern: re.Pattern = re.compile(r'Lei/(Kg|L|buc)')
    # Etykieta licznika koszyka: "2 produse"
    item_count_pattern: re.Pattern = re.compile(r'^(\d+)\s+produse?$')
    # Kwota w bani sklejona z walutą i kodem produktu: "989Lei24085", "12999Lei24085".
    # Zawsze cały ciąg cyfr przed walutą, nigdy jego końcówka
    line_total_pattern: re.Pattern = re.compile(r'(?<!\d)(\d{3,})Lei\d{5}')

    @property
    def strip_pattern(self) -> re.Pattern:
        keep = re.escape(self.thousands_sep) + re.escape(self.decimal_sep)
        return re.compile(rf'[^\d{keep}]')


RON = SiteLocale()
