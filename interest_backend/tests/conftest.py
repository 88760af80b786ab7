import pytest
from flask.testing import FlaskClient

from interest_backend.app import create_app
from interest_backend.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(app_name="Interest Calculator", app_env="test", log_level="DEBUG")


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    app = create_app(settings)
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def form() -> dict:
    return {
        "principal": "1000000",
        "annualRatePercent": "5",
        "timeYears": "2",
        "compoundingFrequencyPerYear": 12,
    }
