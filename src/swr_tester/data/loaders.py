import os
import pandas as pd
from ..config import DataPoint
from ..errors import NonContiguousSeriesError

def log(msg: str):
    if os.environ.get("SWR_TESTER_DEBUG"):
        print(f"[debug] {msg}")

def read_monthly_csv(path):
    """Read a CSV whose first column is a date index (one row per month)."""
    log(f"Reading monthly data from {path}")
    df = pd.read_csv(path, index_col=0, parse_dates=True)
    return df.sort_index()

def series_from_pandas(series: pd.Series):
    """Convert a monthly pandas Series (DatetimeIndex or PeriodIndex) to DataPoints."""
    s = series.dropna()
    idx = s.index
    if isinstance(idx, pd.PeriodIndex):
        years, months = idx.year, idx.month
    else:
        idx = pd.DatetimeIndex(idx)
        years, months = idx.year, idx.month
    keys = list(zip(years, months))
    if len(set(keys)) != len(keys):
        raise NonContiguousSeriesError(f"{series.name}: more than one value for the same month")
    return [DataPoint(int(y), int(m), float(v)) for (y, m), v in zip(keys, s.to_numpy())]

def returns_from_prices(prices_m: pd.DataFrame):
    """
    Month-end prices -> one growth-factor series per column.
    A factor of 1.02 means the price rose 2% over that month.
    """
    prices_m = prices_m.sort_index().dropna(axis=1, how="all").dropna(how="any")
    factors = prices_m.pct_change(fill_method=None).dropna() + 1.0
    log(f"Built return factors for {list(factors.columns)}: {len(factors)} months")
    return {col: series_from_pandas(factors[col]) for col in factors.columns}

def inflation_from_cpi(cpi: pd.Series):
    """CPI levels -> monthly inflation factors."""
    factors = (cpi.sort_index().pct_change(fill_method=None) + 1.0).dropna()
    return series_from_pandas(factors.rename(cpi.name or "inflation"))
