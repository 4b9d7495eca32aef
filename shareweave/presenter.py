# ----- presenter.py -----
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend
from tabulate import tabulate

from shareweave.errors import ShareWeaveError
from shareweave.fraction import Fraction
from shareweave.numtext import to_decimal


def render_secret(secret) -> str:
    """Canonical text of a secret: a bare integer, or "num/den" when inexact."""
    if isinstance(secret, Fraction):
        return str(secret)
    if isinstance(secret, int) and not isinstance(secret, bool):
        return to_decimal(secret)
    raise TypeError(f"cannot render secret of type {type(secret).__name__}")


def secret_fingerprint(secret) -> str:
    """SHA-256 commitment over the canonical rendering of the secret."""
    digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
    digest.update(render_secret(secret).encode("utf-8"))
    return digest.finalize().hex()


def share_table(raw_shares, decoded, selected) -> str:
    """Table of every share in the document, marking the ones used."""
    # identity, not value: duplicate x values may sit outside the selection
    selected_ids = {id(share) for share in selected}
    rows = [
        [to_decimal(raw.x), raw.base, raw.value, to_decimal(share.y), "yes" if id(share) in selected_ids else ""]
        for raw, share in zip(raw_shares, decoded)
    ]
    # digit strings such as "1e5" must not be reparsed as floats
    return tabulate(rows, headers=["x", "base", "value", "y", "selected"], disable_numparse=True)


def describe_failure(exc) -> str:
    if isinstance(exc, ShareWeaveError):
        return f"{exc.kind}: {exc}"
    return f"{type(exc).__name__}: {exc}"
