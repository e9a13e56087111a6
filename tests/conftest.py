"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from cabfare.config.settings import Settings
from cabfare.core.calculator import FareCalculator
from cabfare.core.catalog_loader import CatalogLoader
from cabfare.models.schema import BodyType, VehicleClass
from tests.test_fixtures import create_example_catalog


@pytest.fixture
def settings():
    """Settings with the default tariff constants."""
    return Settings()


@pytest.fixture
def default_catalog():
    """The Chennai 2025 catalog shipped with the package."""
    return CatalogLoader.load_default()


@pytest.fixture
def calculator(default_catalog, settings):
    """Calculator over the shipped catalog."""
    return FareCalculator(default_catalog, settings)


@pytest.fixture
def sample_catalog():
    """Create a small catalog covering fallback cases."""
    return create_example_catalog()


@pytest.fixture
def sample_vehicle():
    """Create a sample vehicle class for testing."""
    return VehicleClass(
        id="sedan",
        name="Sedan",
        popular_models="Dzire, Etios",
        drop_rate=16,
        round_rate=14,
        seats=4,
        body_type=BodyType.SEDAN,
        min_km=250,
        batta=300,
        night_charge=200
    )
