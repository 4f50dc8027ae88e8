"""
Exception hierarchy for share decoding, reconstruction and solving.

Decode and reconstruction errors are local to one share or one
combination; the orchestrator recovers from them. Solve errors are fatal.
"""


class ShareVoteError(ValueError):
    """Base class for every error raised by sharevote."""


# ----- per-share decode failures -----

class DecodeError(ShareVoteError):
    pass


class InvalidBase(DecodeError):
    def __init__(self, base):
        self.base = base
        super().__init__(f"Invalid base: {base!r}.")


class InvalidDigit(DecodeError):
    def __init__(self, char):
        self.char = char
        super().__init__(f"Invalid digit {char!r}.")


class DigitOutOfRange(DecodeError):
    def __init__(self, char, base):
        self.char = char
        self.base = base
        super().__init__(f"Digit {char!r} out of base {base} range.")


class MalformedShare(DecodeError):
    """Entry is not an object with string 'base' and 'value' fields."""


# ----- per-combination reconstruction failures -----

class ReconstructionError(ShareVoteError):
    pass


class DuplicateCoordinate(ReconstructionError):
    def __init__(self, x):
        self.x = x
        super().__init__(f"Duplicate x: {x}")


class ZeroDenominator(ReconstructionError):
    def __init__(self):
        super().__init__("Zero denominator.")


class NonIntegerResult(ReconstructionError):
    def __init__(self, numerator, denominator):
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(f"Secret not exact: {numerator}/{denominator}")


# ----- fatal solve failures -----

class SolveError(ShareVoteError):
    pass


class InvalidThreshold(SolveError):
    def __init__(self, k):
        self.k = k
        super().__init__(f"Missing or invalid threshold 'k': {k!r}.")


class InsufficientShares(SolveError):
    def __init__(self, available, required):
        self.available = available
        self.required = required
        super().__init__(f"Only {available} valid shares, need {required}.")


class NoMajoritySecret(SolveError):
    def __init__(self, attempted=0):
        self.attempted = attempted
        super().__init__(
            f"No majority secret found ({attempted} combinations attempted)."
        )
