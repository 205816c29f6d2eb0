"""Game tree search: exact, depth-bounded and time-bounded."""

from .bounded import CutoffTest, EvalFn, alpha_beta_depth_search, alpha_beta_search, depth_cutoff
from .exact import alpha_beta_full_search, minimax_decision
from .iterative import (
    DeepeningResult,
    iterative_alpha_beta,
    time_limited_alpha_beta,
    time_limited_search,
)

__all__ = [
    "CutoffTest",
    "DeepeningResult",
    "EvalFn",
    "alpha_beta_depth_search",
    "alpha_beta_full_search",
    "alpha_beta_search",
    "depth_cutoff",
    "iterative_alpha_beta",
    "minimax_decision",
    "time_limited_alpha_beta",
    "time_limited_search",
]
