from dataclasses import dataclass
from enum import Enum
from typing import List

from .errors import UnknownRebalancingError

@dataclass(frozen=True)
class Allocation:
    asset: str
    weight: float  # percent, 0..100

@dataclass(frozen=True)
class Portfolio:
    allocations: List[Allocation]

    def weights_vector(self):
        import numpy as np
        return np.array([a.weight / 100.0 for a in self.allocations], dtype=float)

    def assets(self):
        return [a.asset for a in self.allocations]

    def __len__(self):
        return len(self.allocations)

@dataclass(frozen=True)
class DataPoint:
    year: int
    month: int      # 1..12
    value: float    # multiplicative monthly factor, 1.02 = +2%

class Rebalancing(Enum):
    NONE = "none"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    THRESHOLD = "threshold"

    def __str__(self):
        return self.value

    @property
    def cost(self) -> float:
        """Trading cost per rebalancing event, in percent."""
        return REBALANCING_COSTS[self]

    @property
    def cost_factor(self) -> float:
        return 1.0 - self.cost / 100.0

# In percent
REBALANCING_COSTS = {
    Rebalancing.NONE: 0.0,
    Rebalancing.MONTHLY: 0.005,
    Rebalancing.YEARLY: 0.01,
    Rebalancing.THRESHOLD: 0.01,
}

_REBALANCING_TOKENS = {r.value: r for r in Rebalancing}

def parse_rebalancing(text: str) -> Rebalancing:
    key = text.strip().lower()
    if key not in _REBALANCING_TOKENS:
        raise UnknownRebalancingError(
            f"Unknown rebalancing {text!r}; expected one of {sorted(_REBALANCING_TOKENS)}"
        )
    return _REBALANCING_TOKENS[key]

def format_rebalancing(rebalancing: Rebalancing) -> str:
    return rebalancing.value

@dataclass(frozen=True)
class SimConfig:
    years: int                      # horizon of every trial
    withdrawal_rate: float          # percent of the start value, per year
    start_year: int
    end_year: int
    monthly_withdrawal: bool = True
    rebalancing: Rebalancing = Rebalancing.NONE
    threshold: float = 0.0          # weight fraction, only used by THRESHOLD
    start_value: float = 1000.0

    @property
    def months(self) -> int:
        return self.years * 12

    @property
    def n_trials(self) -> int:
        return 12 * max(0, self.end_year - self.years - self.start_year + 1)
