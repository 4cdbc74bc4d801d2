class SWRError(ValueError):
    """Base class for every input the simulator refuses to run with."""

class InsufficientDataError(SWRError):
    """A series does not cover a month some trial needs."""

class SeriesLengthMismatchError(SWRError):
    """The number of asset series differs from the number of allocations."""

class NonContiguousSeriesError(SWRError):
    """A series is not ascending month by month without gaps."""

class InvalidConfigurationError(SWRError):
    pass

class ZeroPortfolioValueError(SWRError):
    """The portfolio allocations add up to nothing."""

class UnknownRebalancingError(SWRError):
    pass
