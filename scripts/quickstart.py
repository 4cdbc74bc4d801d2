from swr_tester.config import Allocation, Portfolio, Rebalancing, SimConfig
from swr_tester.data.loaders import inflation_from_cpi, returns_from_prices
from swr_tester.engine.counter import simulations_ran
from swr_tester.engine.simulator import HistoricalSimulator
import numpy as np
import pandas as pd

def synthetic_market(start="1950-01-31", end="2020-12-31"):
    """Deterministic month-end prices for two assets plus a CPI index."""
    idx = pd.date_range(start, end, freq="ME")
    t = np.arange(len(idx))
    stock = 0.007 + 0.04 * np.sin(t / 7.0) + 0.02 * np.sin(t / 41.0)
    bond = 0.003 + 0.01 * np.sin(t / 13.0)
    infl = 0.0025 + 0.002 * np.sin(t / 29.0)
    prices = pd.DataFrame({
        "STOCKS": 100 * np.cumprod(1 + stock),
        "BONDS": 100 * np.cumprod(1 + bond),
    }, index=idx)
    cpi = pd.Series(100 * np.cumprod(1 + infl), index=idx, name="CPI")
    return prices, cpi

def main():
    # 1) Portfolio
    p = Portfolio([
        Allocation("STOCKS", 60),
        Allocation("BONDS", 40),
    ])

    # 2) Data
    prices_m, cpi = synthetic_market()
    factors = returns_from_prices(prices_m)
    inflation = inflation_from_cpi(cpi)

    # 3) Run every 30-year window, for each rebalancing policy
    sim = HistoricalSimulator(p, inflation, [factors[a] for a in p.assets()])
    print("=== Historical windows, 30 years at 4% ===")
    for policy in Rebalancing:
        cfg = SimConfig(years=30, withdrawal_rate=4.0, start_year=1951, end_year=2020,
                        monthly_withdrawal=True, rebalancing=policy, threshold=0.05)
        res = sim.run(cfg)
        print(f"{str(policy):>9}: success {res.success_rate:6.2f}% "
              f"({res.successes}/{res.total})  median TV {res.tv_median:,.0f}  "
              f"min {res.tv_minimum:,.0f}  max {res.tv_maximum:,.0f}")

    print(f"Trials simulated: {simulations_ran()}")


if __name__ == "__main__":
    main()
