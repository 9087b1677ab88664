from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from cart_monitor.config import Settings
from cart_monitor.core.site_locale import SiteLocale, RON


@dataclass
class ScenarioContext:
    # Identyfikacja
    scenario_name: str
    environment_url: str

    # Konfiguracja koszyka
    search_terms: list[str] = field(default_factory=list)
    email: Optional[str] = None
    password: Optional[str] = None
    total_tolerance: Decimal = Decimal("0.05")

    # Czasy oczekiwania (ms)
    expect_timeout: int = 10_000
    network_idle_timeout: int = 3_000

    locale: SiteLocale = RON

    @property
    def should_login(self) -> bool:
        return bool(self.email and self.password)

    def url(self, path: str = "/") -> str:
        return f"{self.environment_url.rstrip('/')}/{path.lstrip('/')}"

    @classmethod
    def from_settings(cls, settings: Settings, scenario_name: str = "add-to-cart") -> "ScenarioContext":
        return cls(
            scenario_name=scenario_name,
            environment_url=settings.base_url,
            search_terms=list(settings.search_terms),
            email=settings.email,
            password=settings.password,
            total_tolerance=settings.total_tolerance,
            expect_timeout=settings.expect_timeout,
            network_idle_timeout=settings.network_idle_timeout,
        )
