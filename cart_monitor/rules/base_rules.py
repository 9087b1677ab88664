from cart_monitor.context import ScenarioContext
from cart_monitor.run_data import RunData
from cart_monitor.rules_result import AlertResult, RulesResult


class BaseRules:
    def __init__(self, context: ScenarioContext):
        self.context = context

    def check(self, run_data: RunData) -> RulesResult:
        raise NotImplementedError

    def alert(
        self,
        business_rule: str,
        description: str = "",
        alert_type: str = "bug",
    ) -> AlertResult:
        return AlertResult(
            business_rule=business_rule,
            description=description,
            alert_type=alert_type,
        )

    def ok(self, alerts: list[AlertResult] = None) -> RulesResult:
        """
        Brak stopu: test kontynuuje.
        Użyj gdy:
          - brak alertów:                    return self.ok()
          - alerty ale test idzie dalej:     return self.ok(alerts=alerts)
        """
        return RulesResult(
            alerts=alerts or [],
        )

    def stop(
        self,
        alerts: list[AlertResult],
        reason: str,
    ) -> RulesResult:
        """
        Zatrzymaj test: dalsze etapy nie mają sensu.
        Użyj gdy brak danych/możliwości do kontynuowania:
          - strona główna się nie załadowała
          - produkt nie trafił do koszyka
          - pusty koszyk
        """
        return RulesResult(
            alerts=alerts,
            should_stop=True,
            stop_reason=reason,
        )
