"""
Test configuration and fixtures for ColorFit tests.
"""
import pytest
from fastapi.testclient import TestClient

from colorfit.main import app
from colorfit.services.colors.model import Color
from colorfit.utils.metrics import reset_metrics as _reset_metrics


# Palette used across the scenario tests: warm wood, cream, sage, saddle, near-black
SCENARIO_BASES = ["#B5651D", "#F5F0E8", "#9CAF88", "#8B4513", "#1C1C1C"]


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    _reset_metrics()


@pytest.fixture
def scenario_bases():
    """Base colors of the living room scenario."""
    return [Color.from_hex(h) for h in SCENARIO_BASES]


@pytest.fixture
def spread_palette():
    """Five clearly distinct hues at varied lightness plus two neutrals."""
    return [
        Color.from_lch(35, 30, 40),    # brown
        Color.from_lch(90, 5, 80),     # cream
        Color.from_lch(60, 35, 140),   # sage
        Color.from_lch(45, 40, 250),   # denim blue
        Color.from_lch(70, 45, 0),     # rose
        Color.from_lch(25, 3, 0),      # charcoal
        Color.from_lch(80, 30, 95),    # straw
    ]
