import pytest

from swr_tester.config import (
    Allocation,
    Portfolio,
    Rebalancing,
    SimConfig,
    format_rebalancing,
    parse_rebalancing,
)
from swr_tester.errors import SWRError, UnknownRebalancingError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("none", Rebalancing.NONE),
        ("monthly", Rebalancing.MONTHLY),
        ("yearly", Rebalancing.YEARLY),
        ("threshold", Rebalancing.THRESHOLD),
        (" Yearly ", Rebalancing.YEARLY),
    ],
)
def test_parse_rebalancing_valid(text, expected):
    assert parse_rebalancing(text) is expected


@pytest.mark.parametrize("text", ["", "weekly", "thresh", "quarterly"])
def test_parse_rebalancing_rejects_unknown_tokens(text):
    with pytest.raises(UnknownRebalancingError):
        parse_rebalancing(text)


def test_unknown_rebalancing_is_a_value_error():
    with pytest.raises(ValueError):
        parse_rebalancing("daily")
    assert issubclass(UnknownRebalancingError, SWRError)


@pytest.mark.parametrize("policy", list(Rebalancing))
def test_format_round_trips_through_parse(policy):
    assert parse_rebalancing(format_rebalancing(policy)) is policy
    assert str(policy) == format_rebalancing(policy)


def test_format_tokens():
    assert [format_rebalancing(r) for r in Rebalancing] == ["none", "monthly", "yearly", "threshold"]


@pytest.mark.parametrize(
    "policy, factor",
    [
        (Rebalancing.NONE, 1.0),
        (Rebalancing.MONTHLY, 1.0 - 0.00005),
        (Rebalancing.YEARLY, 1.0 - 0.0001),
        (Rebalancing.THRESHOLD, 1.0 - 0.0001),
    ],
)
def test_rebalancing_cost_factors(policy, factor):
    assert policy.cost_factor == pytest.approx(factor)


def test_portfolio_weights_are_fractions(sixty_forty):
    assert sixty_forty.weights_vector().tolist() == pytest.approx([0.6, 0.4])
    assert sixty_forty.assets() == ["US_STOCKS", "US_BONDS"]
    assert len(sixty_forty) == 2


@pytest.mark.parametrize(
    "years, start, end, trials",
    [
        (1, 2000, 2001, 12),
        (30, 1871, 2020, 12 * 120),
        (5, 2000, 2004, 0),
    ],
)
def test_sim_config_trial_count(years, start, end, trials):
    cfg = SimConfig(years=years, withdrawal_rate=4.0, start_year=start, end_year=end)
    assert cfg.n_trials == trials
    assert cfg.months == years * 12


def test_sim_config_defaults():
    cfg = SimConfig(years=30, withdrawal_rate=4.0, start_year=1950, end_year=2020)
    assert cfg.monthly_withdrawal is True
    assert cfg.rebalancing is Rebalancing.NONE
    assert cfg.start_value == 1000.0
    assert Portfolio([Allocation("X", 100)]).weights_vector().tolist() == [1.0]
