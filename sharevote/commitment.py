import hmac

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend


def create_commitment(secret: int) -> str:
    """SHA-256 commitment over the secret's decimal text, hex encoded."""
    digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
    digest.update(str(secret).encode("ascii"))
    return digest.finalize().hex()


def verify_commitment(secret: int, commitment: str) -> bool:
    """Check a recovered secret against a previously published commitment."""
    expected = create_commitment(secret)
    given = commitment.strip().lower().encode("utf-8")
    return hmac.compare_digest(expected.encode("ascii"), given)
