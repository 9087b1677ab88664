from cart_monitor.run_data import RunData
from cart_monitor.rules_result import RulesResult
from cart_monitor.rules.base_rules import BaseRules

NAME_PREFIX_LENGTH = 6


def name_in_cart(product_name: str, cart_names: list[str], prefix: int = NAME_PREFIX_LENGTH) -> bool:
    """
    Nazwy w koszyku bywają skrócone / inaczej sformatowane niż na listingu,
    więc porównujemy pierwsze znaki, bez wielkości liter, w obie strony.
    """
    product = product_name.lower()
    needle = product[:prefix]
    for cart_name in cart_names:
        cart_name = cart_name.lower()
        if needle in cart_name or cart_name[:prefix] in product:
            return True
    return False


# ── Cart ──────────────────────────────────────────────────────────────────────

class CartRules(BaseRules):
    def check(self, run_data: RunData) -> RulesResult:
        cart = run_data.cart
        alerts = []

        if not cart or not cart.line_items:
            return self.stop(
                alerts=[self.alert('CART_EMPTY', 'Koszyk pusty po dodaniu produktów')],
                reason='Pusty koszyk',
            )

        expected = len(run_data.products)

        if len(cart.line_items) < expected:
            alerts.append(self.alert(
                'CART_TOO_FEW_ITEMS',
                f'W koszyku {len(cart.line_items)} pozycji, dodano {expected}',
            ))

        if cart.total_quantity < expected:
            alerts.append(self.alert(
                'CART_QUANTITY_TOO_LOW',
                f'Łączna ilość {cart.total_quantity} < {expected}',
            ))

        cart_names = [item.name for item in cart.line_items]
        for product in run_data.products:
            if not name_in_cart(product.name, cart_names):
                alerts.append(self.alert(
                    'CART_PRODUCT_MISSING',
                    f'Produktu "{product.name}" nie ma w koszyku {cart_names}',
                ))

        # Suma 0 = nie udało się jej odczytać, to sygnał do weryfikacji a nie błąd sklepu
        if cart.displayed_total <= 0:
            alerts.append(self.alert('CART_NO_TOTAL', 'Brak sumy koszyka', alert_type='to_verify'))
        else:
            difference = abs(cart.displayed_total - cart.computed_total)
            if difference > self.context.total_tolerance:
                alerts.append(self.alert(
                    'CART_TOTAL_MISMATCH',
                    f'Suma koszyka {cart.displayed_total} != suma pozycji {cart.computed_total} '
                    f'(różnica {difference})',
                ))

        return self.ok(alerts=alerts)
