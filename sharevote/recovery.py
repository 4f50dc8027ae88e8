# ----- recovery.py -----
import logging
import os
from collections import Counter

from tqdm import tqdm

import config
from sharevote.codec import decode, parse_base, decode_coordinate
from sharevote.combinatorics import combinations, count_combinations
from sharevote.crypto import reconstruct
from sharevote.entities import Share
from sharevote.errors import (
    DecodeError, MalformedShare, ReconstructionError,
    InvalidThreshold, InsufficientShares, NoMajoritySecret,
)
from sharevote.tracker import RecoveryTracker

logger = logging.getLogger(__name__)


def decode_share(key, entry) -> Share:
    """Decode one document entry into a Share, raising DecodeError on bad input."""
    valid_base = isinstance(entry.base, (str, int)) and not isinstance(entry.base, bool)
    if not valid_base or not isinstance(entry.digits, str):
        raise MalformedShare(f"Share {key!r} needs string 'base' and 'value' fields.")

    if isinstance(key, int) and not isinstance(key, bool):
        x = key
    else:
        x = decode_coordinate(str(key))
    y = decode(parse_base(entry.base), entry.digits)
    return Share(x, y)


def check_threshold(k):
    """k must be a positive integer; an integral float such as 2.0 counts as one."""
    if isinstance(k, float) and k.is_integer():
        k = int(k)
    if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
        raise InvalidThreshold(k)
    return k


def select_secret(tally, tie_break="first_seen"):
    """
    Pick the secret with the highest vote count.

    "first_seen": among tied secrets, the one whose first vote came earliest
    in combination order wins. `tally` must preserve insertion order.
    "smallest": among tied secrets, the smallest value wins.
    """
    if tie_break not in config.Config.TIE_BREAK_RULES:
        raise ValueError(f"Unknown tie-break rule: {tie_break!r}")
    if not tally:
        return None, 0

    if tie_break == "smallest":
        secret, votes = max(tally.items(), key=lambda item: (item[1], -item[0]))
        return secret, votes

    best_secret, best_votes = None, 0
    for secret, votes in tally.items():
        if votes > best_votes:
            best_secret, best_votes = secret, votes
    return best_secret, best_votes


class RecoveryResult:
    """Outcome of one successful reconstruction run."""

    def __init__(self, secret, votes, tally, shares, skipped, attempted,
                 rejected, truncated, recovery_id=None, audit=None):
        self.secret = secret
        self.votes = votes
        self.tally = tally
        self.shares = shares
        self.skipped = skipped
        self.attempted = attempted
        self.rejected = rejected
        self.truncated = truncated
        self.recovery_id = recovery_id
        self.audit = audit

    def candidates(self, top=None):
        """Candidate secrets ordered by votes, most supported first."""
        ranked = sorted(self.tally.items(), key=lambda item: -item[1])
        return ranked if top is None else ranked[:top]

    def __repr__(self):
        return (f"RecoveryResult(secret={self.secret}, votes={self.votes}, "
                f"attempted={self.attempted}, rejected={self.rejected})")


class SecretRecovery:
    """
    Majority-vote reconstruction over every k-subset of the decodable shares.
    Malformed shares are skipped and inconsistent subsets cast no vote; only
    threshold, share-count and empty-tally failures abort a run.

    Without a `tracker`, every run gets its own and its log is returned as
    `RecoveryResult.audit`. A supplied tracker keeps every run; pruning
    `tracker.logs` is then up to the caller.
    """

    def __init__(self, max_combinations=None, tie_break=None, show_progress=None,
                 tracker=None):
        self.max_combinations = config.Config.combination_limit(max_combinations)
        self.tie_break = tie_break or config.Config.TIE_BREAK
        if self.tie_break not in config.Config.TIE_BREAK_RULES:
            raise ValueError(f"Unknown tie-break rule: {self.tie_break!r}")
        self.show_progress = (config.Config.SHOW_PROGRESS
                              if show_progress is None else show_progress)
        self.tracker = tracker

    def decode_shares(self, doc, recovery_id=None, tracker=None):
        tracker = tracker if tracker is not None else RecoveryTracker()
        shares = []
        skipped = {}
        for key, entry in doc.entries.items():
            try:
                shares.append(decode_share(key, entry))
            except DecodeError as e:
                logger.warning("[ShareVote] Invalid share '%s': %s", key, e)
                skipped[key] = str(e)
                tracker.log_share_skipped(recovery_id, key, str(e))
        return shares, skipped

    def recover(self, doc) -> RecoveryResult:
        tracker = self.tracker if self.tracker is not None else RecoveryTracker()
        recovery_id = os.urandom(8).hex()
        tracker.log_recovery_start(recovery_id, doc.k, len(doc.entries))
        try:
            return self._recover(doc, recovery_id, tracker)
        except (InvalidThreshold, InsufficientShares, NoMajoritySecret) as e:
            tracker.log_recovery_failure(recovery_id, str(e))
            raise

    def _recover(self, doc, recovery_id, tracker):
        k = check_threshold(doc.k)

        shares, skipped = self.decode_shares(doc, recovery_id, tracker)
        if len(shares) < k:
            raise InsufficientShares(len(shares), k)

        total = count_combinations(len(shares), k)
        if self.max_combinations is not None:
            total = min(total, self.max_combinations)
        logger.info("[ShareVote] %d valid shares, threshold %d, %d combinations to try.",
                    len(shares), k, total)

        tally = Counter()
        attempted = rejected = 0
        truncated = False
        groups = tqdm(combinations(shares, k), total=total, unit="comb",
                      desc="[ShareVote] combinations", disable=not self.show_progress)
        for group in groups:
            if self.max_combinations is not None and attempted >= self.max_combinations:
                truncated = True
                logger.warning("[ShareVote] Combination limit %d reached; using partial tally.",
                               self.max_combinations)
                tracker.log_limit_reached(recovery_id, self.max_combinations)
                break
            attempted += 1
            try:
                secret = reconstruct(group)
            except ReconstructionError as e:
                rejected += 1
                logger.debug("[ShareVote] Discarding combination %s: %s",
                             [share.x for share in group], e)
                tracker.log_combination_rejected(recovery_id, type(e).__name__)
                continue
            tally[secret] += 1
        groups.close()

        secret, votes = select_secret(tally, self.tie_break)
        if secret is None:
            raise NoMajoritySecret(attempted)

        tracker.log_recovery_success(recovery_id, secret, votes)
        return RecoveryResult(
            secret=secret,
            votes=votes,
            tally=dict(tally),
            shares=shares,
            skipped=skipped,
            attempted=attempted,
            rejected=rejected,
            truncated=truncated,
            recovery_id=recovery_id,
            audit=tracker.get_log(recovery_id),
        )


def solve(doc, **options) -> int:
    """Reconstruct the majority secret of `doc`; see SecretRecovery for options."""
    return SecretRecovery(**options).recover(doc).secret
