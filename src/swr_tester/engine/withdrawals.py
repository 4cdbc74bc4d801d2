import numpy as np

def initial_withdrawal(start_value: float, withdrawal_rate: float) -> float:
    """Nominal yearly withdrawal, fixed at the start of a trial."""
    return start_value * withdrawal_rate / 100.0

def withdraw_paths(paths, amounts):
    """Remove amounts[i] from row i of `paths` in proportion to its asset values.

    Each asset is floored at zero on its own. Empty rows are left untouched.
    """
    total = paths.sum(axis=1)
    live = total > 0.0
    share = paths / np.where(live, total, 1.0)[:, None]
    drawn = np.maximum(paths - share * np.asarray(amounts, dtype=float)[:, None], 0.0)
    paths[:] = np.where(live[:, None], drawn, paths)
    return paths

def withdraw(values, amount: float):
    """Remove `amount` from one trial's (N,) values in proportion to their size."""
    withdraw_paths(values[np.newaxis, :], np.array([amount]))
    return values
