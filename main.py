# ----- main.py -----
import argparse
import json
import logging
import sys

from tabulate import tabulate

import config
from sharevote.commitment import create_commitment, verify_commitment
from sharevote.entities import InputDocument, load_document
from sharevote.errors import ShareVoteError
from sharevote.recovery import SecretRecovery
from sharevote.samples import SAMPLE_DOCUMENTS


# --- Helper Functions ---
def print_header(title):
    print("\n" + "="*50)
    print(f"{title}")
    print("="*50)

def print_backend(message):
    print(f"[BACKEND LOG]... {message}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sharevote",
        description="Reconstruct a threshold-shared secret by majority vote over k-subsets.",
    )
    parser.add_argument("documents", nargs="*", help="share documents (JSON)")
    parser.add_argument("--demo", action="store_true", help="solve the bundled sample documents")
    parser.add_argument("--max-combinations", type=int, default=None,
                        help="stop after this many combinations (default: unbounded)")
    parser.add_argument("--tie-break", choices=config.Config.TIE_BREAK_RULES,
                        default=config.Config.TIE_BREAK)
    parser.add_argument("--commitment", help="hex SHA-256 commitment to verify the secret against")
    parser.add_argument("--progress", action="store_true", help="show a progress bar")
    parser.add_argument("--top", type=int, default=config.Config.TOP_CANDIDATES,
                        help="candidate secrets to list")
    parser.add_argument("--log-level", type=str.upper, default=config.Config.LOG_LEVEL,
                        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"))
    return parser


def iter_documents(args):
    """Yield (name, InputDocument) pairs; unreadable files yield the error instead."""
    if args.demo:
        for name, data in SAMPLE_DOCUMENTS.items():
            yield name, InputDocument.from_mapping(data)
    for path in args.documents:
        try:
            yield path, load_document(path)
        except (OSError, json.JSONDecodeError, ShareVoteError) as e:
            yield path, e


def report(result, top):
    print(f"Secret: {result.secret}")
    print_backend(
        f"{len(result.shares)} valid shares, {len(result.skipped)} skipped, "
        f"{result.attempted} combinations tried, {result.rejected} rejected"
    )
    if result.truncated:
        print_backend("Combination limit reached; result is from a partial tally.")
    for key, reason in result.skipped.items():
        print_backend(f"Skipped share '{key}': {reason}")
    rows = [(secret, votes) for secret, votes in result.candidates(top)]
    print(tabulate(rows, headers=["Candidate secret", "Votes"], tablefmt="simple"))


def solve_document(name, doc, recovery, args):
    print_header(name)
    if isinstance(doc, Exception):
        print(f"Error: {doc}")
        return False
    try:
        result = recovery.recover(doc)
    except ShareVoteError as e:
        print(f"Error: {e}")
        return False

    report(result, args.top)
    print_backend(f"Commitment: {create_commitment(result.secret)}")
    if args.commitment:
        if verify_commitment(result.secret, args.commitment):
            print("✓ Commitment verified!")
        else:
            print("⚠️ Commitment verification failed!")
            return False
    return True


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.documents and not args.demo:
        parser.error("give at least one document or --demo")

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(message)s")
    recovery = SecretRecovery(
        max_combinations=args.max_combinations,
        tie_break=args.tie_break,
        show_progress=args.progress,
    )

    ok = True
    for name, doc in iter_documents(args):
        ok = solve_document(name, doc, recovery, args) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
