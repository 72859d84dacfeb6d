from .ats_service import analyze_ats
from .rewrite_service import (
    AttemptOutput,
    AttemptState,
    RewriteOutcome,
    WordCountPolicy,
    resolve_outcome,
    rewrite_for_job,
    run_attempts,
)

__all__ = [
    "analyze_ats",
    "AttemptOutput",
    "AttemptState",
    "RewriteOutcome",
    "WordCountPolicy",
    "resolve_outcome",
    "rewrite_for_job",
    "run_attempts",
]
