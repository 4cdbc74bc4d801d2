from dataclasses import dataclass
import numpy as np
from ..analytics.metrics import Results, summarize
from ..config import Portfolio, Rebalancing, SimConfig, parse_rebalancing
from ..data.loaders import log
from ..data.series import MonthlySeries, add_months, next_month
from ..errors import (
    InvalidConfigurationError,
    SeriesLengthMismatchError,
    ZeroPortfolioValueError,
)
from .counter import DEFAULT_COUNTER
from .rebalancing import rebalance, rebalance_paths
from .withdrawals import initial_withdrawal, withdraw, withdraw_paths

@dataclass(frozen=True)
class TrialOutcome:
    start_year: int
    start_month: int
    end_year: int
    end_month: int
    terminal_value: float

    @property
    def success(self) -> bool:
        return self.terminal_value > 0.0

def _as_series(series, name):
    if isinstance(series, MonthlySeries):
        return series
    return MonthlySeries(series, name=name)

class HistoricalSimulator:
    """Replays every historical rolling window of a fixed-rate withdrawal plan.

    Series are validated once here; each run() validates its config against them
    and then steps all of its trials together, one simulated month at a time.
    """

    def __init__(self, portfolio, inflation, asset_series, counter=None):
        if not isinstance(portfolio, Portfolio):
            portfolio = Portfolio(list(portfolio))
        asset_series = list(asset_series)
        if len(asset_series) != len(portfolio):
            raise SeriesLengthMismatchError(
                f"{len(asset_series)} asset series for {len(portfolio)} allocations"
            )
        self.portfolio = portfolio
        self.w = portfolio.weights_vector()
        if (self.w < 0).any():
            raise InvalidConfigurationError(f"Negative allocation in {portfolio.assets()}")
        if self.w.sum() <= 0.0:
            raise ZeroPortfolioValueError("Allocation weights sum to zero")
        self.inflation = _as_series(inflation, "inflation")
        self.assets = [_as_series(s, name) for s, name in zip(asset_series, portfolio.assets())]
        self.counter = counter if counter is not None else DEFAULT_COUNTER

    def check_config(self, cfg: SimConfig):
        if cfg.years < 1:
            raise InvalidConfigurationError(f"Horizon must be at least one year, got {cfg.years}")
        if cfg.end_year < cfg.start_year + cfg.years:
            raise InvalidConfigurationError(
                f"end_year {cfg.end_year} leaves no {cfg.years}-year window after {cfg.start_year}"
            )
        if cfg.withdrawal_rate < 0:
            raise InvalidConfigurationError(f"Negative withdrawal rate {cfg.withdrawal_rate}")
        if cfg.rebalancing is Rebalancing.THRESHOLD and not 0.0 <= cfg.threshold <= 1.0:
            raise InvalidConfigurationError(f"Threshold {cfg.threshold} outside [0, 1]")
        if cfg.start_value <= 0:
            raise InvalidConfigurationError(f"Start value must be positive, got {cfg.start_value}")

        # first month read by the first trial, last month read by the last one
        first = next_month(cfg.start_year, 1)
        last = add_months(cfg.end_year - cfg.years, 12, cfg.months)
        for series in [self.inflation, *self.assets]:
            series.index_of(*first)
            series.index_of(*last)

    def trial_starts(self, cfg: SimConfig):
        for year in range(cfg.start_year, cfg.end_year - cfg.years + 1):
            for month in range(1, 13):
                yield year, month

    def run_trial(self, cfg: SimConfig, year: int, month: int) -> TrialOutcome:
        values = cfg.start_value * self.w
        data_year, data_month = next_month(year, month)
        returns = [s.cursor(data_year, data_month) for s in self.assets]
        inflation = self.inflation.cursor(data_year, data_month)
        end_year, end_month = add_months(year, month, cfg.months - 1)

        withdrawal = initial_withdrawal(cfg.start_value, cfg.withdrawal_rate)

        for t in range(cfg.months):
            # 1) returns
            values *= np.array([c.advance() for c in returns])

            # 2) monthly or threshold rebalance
            rebalance(values, self.w, cfg.rebalancing, cfg.threshold, boundary="month")

            # 3) inflation never resets within a trial
            withdrawal *= inflation.advance()
            if cfg.monthly_withdrawal:
                withdraw(values, withdrawal / 12.0)

            # 4) every full year of the trial
            if (t + 1) % 12 == 0:
                rebalance(values, self.w, cfg.rebalancing, cfg.threshold, boundary="year")
                if not cfg.monthly_withdrawal:
                    withdraw(values, withdrawal)

        return TrialOutcome(year, month, end_year, end_month, float(values.sum()))

    def _gather(self, series, data_starts, months):
        # (n_trials, months) factors, row i read from data_starts[i] on
        offsets = np.array([series.index_of(y, m) for y, m in data_starts])
        idx = offsets[:, None] + np.arange(months)
        return series.values[idx]

    def run_paths(self, cfg: SimConfig, starts):
        """Step every trial in `starts` together; returns the (n_trials,) terminal values.

        Same month ordering as run_trial, on an (n_trials, N) value matrix.
        """
        data_starts = [next_month(y, m) for y, m in starts]
        R = np.stack([self._gather(s, data_starts, cfg.months) for s in self.assets], axis=2)
        I = self._gather(self.inflation, data_starts, cfg.months)

        paths = np.tile(cfg.start_value * self.w, (len(starts), 1))
        withdrawal = np.full(len(starts), initial_withdrawal(cfg.start_value, cfg.withdrawal_rate))

        for t in range(cfg.months):
            paths *= R[:, t, :]
            rebalance_paths(paths, self.w, cfg.rebalancing, cfg.threshold, boundary="month")
            withdrawal *= I[:, t]
            if cfg.monthly_withdrawal:
                withdraw_paths(paths, withdrawal / 12.0)
            if (t + 1) % 12 == 0:
                rebalance_paths(paths, self.w, cfg.rebalancing, cfg.threshold, boundary="year")
                if not cfg.monthly_withdrawal:
                    withdraw_paths(paths, withdrawal)

        return paths.sum(axis=1)

    def run_trials(self, cfg: SimConfig):
        self.check_config(cfg)
        starts = list(self.trial_starts(cfg))
        terminal = self.run_paths(cfg, starts)
        outcomes = []
        for (y, m), tv in zip(starts, terminal):
            end_year, end_month = add_months(y, m, cfg.months - 1)
            outcomes.append(TrialOutcome(y, m, end_year, end_month, float(tv)))
        return outcomes

    def run(self, cfg: SimConfig) -> Results:
        outcomes = self.run_trials(cfg)
        res = summarize([o.terminal_value for o in outcomes])
        self.counter.add(len(outcomes))
        log(
            f"{len(outcomes)} trials, {cfg.years}y at {cfg.withdrawal_rate}% "
            f"({cfg.rebalancing}): success {res.success_rate:.2f}%"
        )
        return res

def simulate(portfolio, inflation_series, asset_series, years: int, withdrawal_rate: float,
             start_year: int, end_year: int, monthly_withdrawal: bool = True,
             rebalancing=Rebalancing.NONE, threshold: float = 0.0) -> Results:
    if isinstance(rebalancing, str):
        rebalancing = parse_rebalancing(rebalancing)
    cfg = SimConfig(
        years=years,
        withdrawal_rate=withdrawal_rate,
        start_year=start_year,
        end_year=end_year,
        monthly_withdrawal=monthly_withdrawal,
        rebalancing=rebalancing,
        threshold=threshold,
    )
    return HistoricalSimulator(portfolio, inflation_series, asset_series).run(cfg)
