import math

import pytest

from swr_tester.config import Allocation, Portfolio
from tests.helpers import monthly_points


@pytest.fixture
def sixty_forty() -> Portfolio:
    return Portfolio([Allocation("US_STOCKS", 60), Allocation("US_BONDS", 40)])


@pytest.fixture
def market() -> dict:
    """Deterministic but uneven stock, bond and inflation factors, 1980-2010."""
    def stock(year, month):
        t = (year - 1980) * 12 + month
        return 1.007 + 0.045 * math.sin(t / 5.0) + 0.02 * math.sin(t / 37.0)

    def bond(year, month):
        t = (year - 1980) * 12 + month
        return 1.003 + 0.012 * math.sin(t / 11.0)

    def inflation(year, month):
        t = (year - 1980) * 12 + month
        return 1.0025 + 0.002 * math.sin(t / 23.0)

    return {
        "stocks": monthly_points(1980, 2010, stock),
        "bonds": monthly_points(1980, 2010, bond),
        "inflation": monthly_points(1980, 2010, inflation),
    }
