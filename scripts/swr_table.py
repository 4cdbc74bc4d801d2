# scripts/swr_table.py
# Run:  python scripts/swr_table.py prices.csv cpi.csv [years] [rebalancing]
#
# prices.csv: month-end prices, first column the date, one column per asset
# cpi.csv:    month-end CPI level, first column the date
# Assets are weighted equally.

import sys

import numpy as np

from swr_tester.analytics.sweep import find_safe_withdrawal_rate, sweep_withdrawal_rates
from swr_tester.config import Allocation, Portfolio, SimConfig, parse_rebalancing
from swr_tester.data.loaders import inflation_from_cpi, read_monthly_csv, returns_from_prices
from swr_tester.engine.simulator import HistoricalSimulator
from swr_tester.errors import SWRError

def main(argv):
    if len(argv) < 2:
        print("usage: swr_table.py prices.csv cpi.csv [years] [rebalancing]", file=sys.stderr)
        return 2
    try:
        years = int(argv[2]) if len(argv) > 2 else 30
        rebalancing = parse_rebalancing(argv[3]) if len(argv) > 3 else parse_rebalancing("yearly")
        factors = returns_from_prices(read_monthly_csv(argv[0]))
        cpi = read_monthly_csv(argv[1]).iloc[:, 0]
        inflation = inflation_from_cpi(cpi)

        weight = 100.0 / len(factors)
        p = Portfolio([Allocation(name, weight) for name in factors])
        sim = HistoricalSimulator(p, inflation, [factors[name] for name in p.assets()])

        # trials starting in January read from February on, and need December of the last year
        series = [sim.inflation, *sim.assets]
        first_year = max(y if m <= 2 else y + 1 for y, m in (s.first for s in series))
        last_year = min(y if m == 12 else y - 1 for y, m in (s.last for s in series))
        cfg = SimConfig(years=years, withdrawal_rate=4.0, start_year=first_year, end_year=last_year,
                        rebalancing=rebalancing, threshold=0.05)

        table = sweep_withdrawal_rates(sim, cfg, np.arange(3.0, 6.01, 0.25))
        safe = find_safe_withdrawal_rate(sim, cfg)
    except (SWRError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"=== {years}-year windows, {first_year}-{last_year}, {rebalancing} rebalancing ===")
    print(table[["success_rate", "tv_median", "tv_minimum", "tv_maximum"]].round(2).to_string())
    print(f"Failsafe withdrawal rate: {safe.withdrawal_rate:.2f}%")
    return 0

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
