from dataclasses import asdict, dataclass
import numpy as np

@dataclass(frozen=True)
class Results:
    successes: int
    failures: int
    success_rate: float     # percent
    tv_median: float
    tv_minimum: float
    tv_maximum: float
    tv_average: float

    @property
    def total(self) -> int:
        return self.successes + self.failures

    def as_dict(self):
        return asdict(self)

def summarize(terminal_values) -> Results:
    """Reduce the terminal values of every trial to counts and statistics.

    A trial succeeds when its terminal value is strictly positive. The median
    is the conventional one: the mean of the two middle values for an even count.
    """
    tv = np.sort(np.asarray(terminal_values, dtype=float))
    if tv.size == 0:
        return Results(0, 0, 0.0, np.nan, np.nan, np.nan, np.nan)

    successes = int((tv > 0.0).sum())
    failures = int(tv.size - successes)
    return Results(
        successes=successes,
        failures=failures,
        success_rate=100.0 * successes / (successes + failures),
        tv_median=float(np.median(tv)),
        tv_minimum=float(tv[0]),
        tv_maximum=float(tv[-1]),
        tv_average=float(tv.mean()),
    )
