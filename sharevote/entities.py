# ----- entities.py -----
import json
import logging
from typing import NamedTuple

from sharevote.errors import ShareVoteError

logger = logging.getLogger(__name__)

METADATA_KEY = "keys"


class Share(NamedTuple):
    """One decoded (x, y) point on the sharing polynomial."""
    x: int
    y: int


class RawShareEntry(NamedTuple):
    """Undecoded y value: numeral base and digit string, as given."""
    base: object
    digits: object


class LagrangeTerm(NamedTuple):
    """y_i * l_i(0) as an unreduced fraction; the denominator may be negative."""
    numerator: int
    denominator: int


class InputDocument:
    """
    Already-parsed share document: threshold metadata plus one raw entry per
    x-coordinate key. `n` is informational only; `k` is validated when solving.
    """

    def __init__(self, k, entries, n=None):
        self.k = k
        self.n = n
        self.entries = dict(entries)

    @classmethod
    def from_mapping(cls, data):
        if not isinstance(data, dict):
            raise ShareVoteError("Share document must be a JSON object.")

        keys = data.get(METADATA_KEY)
        if not isinstance(keys, dict):
            keys = {}

        entries = {}
        for key, value in data.items():
            if key == METADATA_KEY:
                continue
            if isinstance(value, dict):
                entries[key] = RawShareEntry(value.get("base"), value.get("value"))
            else:
                entries[key] = RawShareEntry(None, None)

        doc = cls(k=keys.get("k"), n=keys.get("n"), entries=entries)
        if doc.n is not None and doc.n != len(entries):
            logger.warning(
                "[ShareVote] Document declares n=%r but carries %d share entries.",
                doc.n, len(entries),
            )
        return doc

    def to_mapping(self):
        data = {METADATA_KEY: {"k": self.k}}
        if self.n is not None:
            data[METADATA_KEY]["n"] = self.n
        for key, entry in self.entries.items():
            data[key] = {"base": entry.base, "value": entry.digits}
        return data

    def __repr__(self):
        return f"InputDocument(n={self.n!r}, k={self.k!r}, entries={len(self.entries)})"


def load_document(path):
    """Read a share document from a JSON file."""
    with open(path, "r") as f:
        return InputDocument.from_mapping(json.load(f))
