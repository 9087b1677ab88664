from decimal import Decimal

import pytest

from cart_monitor.config import Settings, parse_args
from cart_monitor.context import ScenarioContext

VARIABLES = (
    'BASE_URL', 'HEADLESS', 'VIEWPORT', 'EXPECT_TIMEOUT_MS', 'NETWORK_IDLE_MS', 'SEARCH_TERMS',
    'TOTAL_TOLERANCE', 'SCREENSHOT_DIR', 'EMAIL', 'PASSWORD',
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in VARIABLES:
        monkeypatch.delenv(f'CART_MONITOR_{name}', raising=False)


def test_defaults():
    settings = Settings.from_env()

    assert settings.base_url == "https://mega-image.ro"
    assert settings.headless is True
    assert settings.viewport == {"width": 1366, "height": 900}
    assert settings.search_terms == ["lapte", "paine"]
    assert settings.total_tolerance == Decimal("0.05")
    assert settings.email is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('CART_MONITOR_BASE_URL', 'https://staging.shop.test/')
    monkeypatch.setenv('CART_MONITOR_HEADLESS', 'false')
    monkeypatch.setenv('CART_MONITOR_VIEWPORT', '1920x1080')
    monkeypatch.setenv('CART_MONITOR_SEARCH_TERMS', ' oua , , unt ')
    monkeypatch.setenv('CART_MONITOR_TOTAL_TOLERANCE', '0.10')
    monkeypatch.setenv('CART_MONITOR_SCREENSHOT_DIR', '')

    settings = Settings.from_env()

    assert settings.base_url == 'https://staging.shop.test'
    assert settings.headless is False
    assert settings.viewport == {"width": 1920, "height": 1080}
    assert settings.search_terms == ["oua", "unt"]
    assert settings.total_tolerance == Decimal("0.10")
    assert settings.screenshot_dir is None


def test_context_from_settings_logs_in_only_with_both_credentials():
    settings = Settings(email="qa@shop.test")
    assert not ScenarioContext.from_settings(settings).should_login

    settings.password = "secret"
    context = ScenarioContext.from_settings(settings)

    assert context.should_login
    assert context.scenario_name == "add-to-cart"
    assert context.url('/checkout') == "https://mega-image.ro/checkout"


def test_cli_flags_override_settings():
    settings = parse_args(
        ["--headed", "--base-url", "https://staging.shop.test/", "--term", "oua", "--term", "unt"],
        Settings(),
    )

    assert settings.headless is False
    assert settings.base_url == "https://staging.shop.test"
    assert settings.search_terms == ["oua", "unt"]


@pytest.mark.parametrize("argv", [["--base-url"], ["--base-url", "--headed"]])
def test_base_url_without_value_keeps_configured_url(argv):
    settings = parse_args(argv, Settings(base_url="https://shop.test"))

    assert settings.base_url == "https://shop.test"
