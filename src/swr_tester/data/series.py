import numpy as np
from ..errors import InsufficientDataError, NonContiguousSeriesError

def next_month(year: int, month: int):
    if month == 12:
        return year + 1, 1
    return year, month + 1

def add_months(year: int, month: int, n: int):
    # month 13 wraps to month 1 of the following year
    idx = year * 12 + (month - 1) + n
    return idx // 12, idx % 12 + 1

class MonthlySeries:
    """Read-only monthly series of multiplicative factors.

    Validated once at construction: ascending by (year, month), one point per
    month, no gaps. Lookups are then plain index arithmetic.
    """

    def __init__(self, points, name: str = "series"):
        self.name = name
        points = list(points)
        if not points:
            raise InsufficientDataError(f"{name}: empty series")
        for p in points:
            if not 1 <= int(p.month) <= 12:
                raise NonContiguousSeriesError(f"{name}: invalid month {p.month} in {p.year}")
        for prev, cur in zip(points, points[1:]):
            if (cur.year, cur.month) != next_month(prev.year, prev.month):
                raise NonContiguousSeriesError(
                    f"{name}: {cur.year}-{cur.month:02d} does not follow {prev.year}-{prev.month:02d}"
                )
        self.first = (int(points[0].year), int(points[0].month))
        self.last = (int(points[-1].year), int(points[-1].month))
        self.values = np.array([p.value for p in points], dtype=float)

    def __len__(self):
        return len(self.values)

    def _offset(self, year: int, month: int) -> int:
        return (year - self.first[0]) * 12 + (month - self.first[1])

    def covers(self, year: int, month: int) -> bool:
        return 0 <= self._offset(year, month) < len(self.values)

    def index_of(self, year: int, month: int) -> int:
        if not self.covers(year, month):
            raise InsufficientDataError(
                f"{self.name}: no data for {year}-{month:02d} "
                f"(covers {self.first[0]}-{self.first[1]:02d} to {self.last[0]}-{self.last[1]:02d})"
            )
        return self._offset(year, month)

    def cursor(self, year: int, month: int) -> "SeriesCursor":
        return SeriesCursor(self, self.index_of(year, month))

class SeriesCursor:
    """Sequential reader over a MonthlySeries; fails instead of reading past the end."""

    def __init__(self, series: MonthlySeries, index: int):
        self.series = series
        self.index = index
        self.stop = len(series)

    @property
    def position(self):
        return add_months(self.series.first[0], self.series.first[1], self.index)

    def advance(self) -> float:
        if self.index >= self.stop:
            year, month = self.position
            raise InsufficientDataError(f"{self.series.name}: exhausted before {year}-{month:02d}")
        value = self.series.values[self.index]
        self.index += 1
        return value
