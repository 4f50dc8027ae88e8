from sharevote.codec import decode
from sharevote.combinatorics import combinations, count_combinations
from sharevote.crypto import reconstruct
from sharevote.entities import Share, RawShareEntry, InputDocument, load_document
from sharevote.errors import (
    ShareVoteError, DecodeError, InvalidBase, InvalidDigit, DigitOutOfRange, MalformedShare,
    ReconstructionError, DuplicateCoordinate, ZeroDenominator, NonIntegerResult,
    SolveError, InvalidThreshold, InsufficientShares, NoMajoritySecret,
)
from sharevote.recovery import SecretRecovery, RecoveryResult, solve

__version__ = "0.1.0"
