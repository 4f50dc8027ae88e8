# Global configuration for ShareVote secret reconstruction
import os


def _env_int(name):
    raw = os.environ.get(name)
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


class Config:
    # Numeral bases
    MIN_BASE = 2
    MAX_BASE = 36
    X_BASE = 10  # x-coordinate keys are decimal text

    # Reconstruction parameters
    MAX_COMBINATIONS = _env_int("SHAREVOTE_MAX_COMBINATIONS")  # None = unbounded
    TIE_BREAK = "first_seen"  # or "smallest"
    TIE_BREAK_RULES = ("first_seen", "smallest")

    # Presentation
    SHOW_PROGRESS = False
    LOG_LEVEL = "WARNING"
    TOP_CANDIDATES = 5

    @classmethod
    def combination_limit(cls, override=None):
        """Explicit limit wins over the configured one; non-positive means none."""
        limit = cls.MAX_COMBINATIONS if override is None else override
        if limit is None or limit <= 0:
            return None
        return limit
