import numpy as np
from ..config import Rebalancing

def _reset_to_targets(paths, weights, cost_factor: float, hit=None):
    if hit is None:
        paths *= cost_factor
        paths[:] = paths.sum(axis=1)[:, None] * weights
    else:
        paid = paths[hit] * cost_factor
        paths[hit] = paid.sum(axis=1)[:, None] * weights

def rebalance_paths(paths, weights, policy: Rebalancing, threshold: float = 0.0, boundary: str = "month"):
    """Apply the rebalancing policy in place to every row of `paths`.

    paths: (n_trials, N) per-asset values, one row per running trial
    weights: (N,) target weights as fractions
    boundary: "month" after every simulated month, "year" after every 12th one
    Returns a (n_trials,) bool mask of the rows that were realigned (and paid the fee).
    """
    n = paths.shape[0]
    if policy is Rebalancing.NONE:
        return np.zeros(n, dtype=bool)

    if policy in (Rebalancing.MONTHLY, Rebalancing.YEARLY):
        wanted = "month" if policy is Rebalancing.MONTHLY else "year"
        if boundary != wanted:
            return np.zeros(n, dtype=bool)
        _reset_to_targets(paths, weights, policy.cost_factor)
        return np.ones(n, dtype=bool)

    # THRESHOLD
    if boundary != "month":
        return np.zeros(n, dtype=bool)
    total = paths.sum(axis=1)
    live = total > 0.0
    drift = np.abs(weights - paths / np.where(live, total, 1.0)[:, None])
    hit = live & (drift >= threshold).any(axis=1)
    if hit.any():
        _reset_to_targets(paths, weights, policy.cost_factor, hit)
    return hit

def rebalance(values, weights, policy: Rebalancing, threshold: float = 0.0, boundary: str = "month") -> bool:
    """Single-trial form of rebalance_paths: `values` is one (N,) vector, modified in place."""
    return bool(rebalance_paths(values[np.newaxis, :], weights, policy, threshold, boundary)[0])
