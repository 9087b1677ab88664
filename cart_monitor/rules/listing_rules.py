from cart_monitor.run_data import RunData
from cart_monitor.rules_result import RulesResult
from cart_monitor.rules.base_rules import BaseRules


# ── Listing ───────────────────────────────────────────────────────────────────

class ListingRules(BaseRules):
    def check(self, run_data: RunData) -> RulesResult:
        # Brak produktu to wyjątek z ListingPage, tu oceniamy tylko ostatnio dodany
        if not run_data.products:
            return self.ok()

        alerts = []
        last = run_data.products[-1]
        if last.price <= 0:
            alerts.append(self.alert(
                'PRODUCT_ZERO_PRICE',
                f'Produkt "{last.name}" ma cenę {last.price}',
                alert_type='to_verify',
            ))

        return self.ok(alerts=alerts)
