from dataclasses import dataclass, field


@dataclass
class AlertResult:
    business_rule: str
    description: str = ""
    alert_type: str = "bug"


@dataclass
class RulesResult:
    alerts: list[AlertResult] = field(default_factory=list)
    should_stop: bool = False
    stop_reason: str = ""
