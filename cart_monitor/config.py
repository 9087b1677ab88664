"""
Konfiguracja uruchomienia: z .env / zmiennych środowiskowych.
Core (pages, price, settle) niczego stąd nie czyta sam, dostaje wartości od ScenarioContext.
"""

import logging
import os
from dataclasses import dataclass, field
from decimal import Decimal

from dotenv import load_dotenv
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://mega-image.ro"


def _bool(value: str | None, default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "tak", "on")


def _viewport(value: str | None) -> dict[str, int]:
    width, height = (value or "1366x900").lower().split("x")
    return {"width": int(width), "height": int(height)}


def _terms(value: str | None) -> list[str]:
    return [t.strip() for t in (value or "lapte,paine").split(",") if t.strip()]


@dataclass
class Settings:
    base_url: str = DEFAULT_BASE_URL
    headless: bool = True
    viewport: dict[str, int] = field(default_factory=lambda: {"width": 1366, "height": 900})
    expect_timeout: int = 10_000
    network_idle_timeout: int = 3_000
    search_terms: list[str] = field(default_factory=lambda: ["lapte", "paine"])
    total_tolerance: Decimal = Decimal("0.05")
    screenshot_dir: str | None = "screenshots"
    email: str | None = None
    password: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            base_url=os.getenv("CART_MONITOR_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            headless=_bool(os.getenv("CART_MONITOR_HEADLESS"), True),
            viewport=_viewport(os.getenv("CART_MONITOR_VIEWPORT")),
            expect_timeout=int(os.getenv("CART_MONITOR_EXPECT_TIMEOUT_MS", "10000")),
            network_idle_timeout=int(os.getenv("CART_MONITOR_NETWORK_IDLE_MS", "3000")),
            search_terms=_terms(os.getenv("CART_MONITOR_SEARCH_TERMS")),
            total_tolerance=Decimal(os.getenv("CART_MONITOR_TOTAL_TOLERANCE", "0.05")),
            screenshot_dir=os.getenv("CART_MONITOR_SCREENSHOT_DIR", "screenshots") or None,
            email=os.getenv("CART_MONITOR_EMAIL") or None,
            password=os.getenv("CART_MONITOR_PASSWORD") or None,
        )


def _option(argv: list[str], name: str) -> str | None:
    """Wartość po fladze albo None gdy flaga jest ostatnia / wartość to kolejna flaga."""
    idx = argv.index(name)
    if idx + 1 >= len(argv) or argv[idx + 1].startswith("--"):
        logger.warning(f"Flaga {name} bez wartości, pomijam")
        return None
    return argv[idx + 1]


def parse_args(argv: list[str], settings: Settings) -> Settings:
    """Flagi z linii poleceń nadpisują wartości z .env."""
    if "--headless" in argv:
        settings.headless = True

    if "--headed" in argv:
        settings.headless = False

    if "--base-url" in argv:
        base_url = _option(argv, "--base-url")
        if base_url:
            settings.base_url = base_url.rstrip("/")

    terms = [argv[i + 1] for i, arg in enumerate(argv[:-1]) if arg == "--term"]
    if terms:
        settings.search_terms = terms

    return settings
