import pytest

from cart_monitor.context import ScenarioContext
from tests.fakes import FakePage


@pytest.fixture
def context():
    return ScenarioContext(
        scenario_name="test",
        environment_url="https://shop.test",
        search_terms=["lapte", "paine"],
        expect_timeout=1000,
        network_idle_timeout=100,
    )


@pytest.fixture
def page():
    return FakePage()
