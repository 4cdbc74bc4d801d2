from dataclasses import dataclass, replace
import pandas as pd
from ..config import SimConfig
from ..data.loaders import log

@dataclass(frozen=True)
class SWRSearchResult:
    """Result of a safe withdrawal rate search."""

    withdrawal_rate: float          # highest rate meeting the target, percent
    target_success_rate: float
    achieved_success_rate: float
    iterations: int

def sweep_withdrawal_rates(simulator, cfg: SimConfig, rates) -> pd.DataFrame:
    """Run the simulator once per withdrawal rate.

    Returns a DataFrame indexed by withdrawal rate (percent) with one column
    per Results field.
    """
    rows = []
    for rate in rates:
        res = simulator.run(replace(cfg, withdrawal_rate=float(rate)))
        log(f"WR {rate:.2f}%: {res.success_rate:.2f}% success")
        rows.append({"withdrawal_rate": float(rate), **res.as_dict()})
    if not rows:
        return pd.DataFrame(columns=["successes", "failures", "success_rate", "tv_median",
                                     "tv_minimum", "tv_maximum", "tv_average"])
    return pd.DataFrame(rows).set_index("withdrawal_rate")

def find_safe_withdrawal_rate(
    simulator,
    cfg: SimConfig,
    target_success: float = 100.0,
    low: float = 0.0,
    high: float = 10.0,
    tolerance: float = 0.01,
    max_iterations: int = 30,
) -> SWRSearchResult:
    """Bisection on the withdrawal rate for the highest one meeting `target_success`.

    The success rate only falls as the rate grows, so the search keeps the
    conservative (low) bound. If even `low` misses the target it is returned as is.
    """
    iterations = 0
    for _ in range(max_iterations):
        if high - low < tolerance:
            break
        iterations += 1
        mid = (low + high) / 2.0
        res = simulator.run(replace(cfg, withdrawal_rate=mid))
        if res.success_rate >= target_success:
            low = mid
        else:
            high = mid

    final = simulator.run(replace(cfg, withdrawal_rate=low))
    return SWRSearchResult(
        withdrawal_rate=low,
        target_success_rate=target_success,
        achieved_success_rate=final.success_rate,
        iterations=iterations,
    )
