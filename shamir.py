import logging
from typing import Optional
import config
from shareweave.errors import InsufficientShares
from shareweave.interpolation import arithmetic_mode, lagrange_at_zero
from shareweave.numtext import to_decimal

logger = logging.getLogger(__name__)


def select_shares(shares, threshold, order):
    """Pick the `threshold` shares that take part in interpolation"""
    if order == "ascending":
        ordered = sorted(shares, key=lambda share: share.x)
    elif order == "declared":
        ordered = list(shares)
    else:
        raise ValueError(
            f"Unknown selection order {order!r}. Expected one of {config.Config.SELECTION_ORDERS}"
        )
    return ordered[:threshold]


class ShamirSecretRecovery:
    """Recovery half of Shamir's Secret Sharing scheme"""

    def __init__(self, threshold: int, modulus: Optional[int] = None, selection_order: Optional[str] = None):
        if threshold < 1:
            raise ValueError(f"Threshold must be at least 1, got {to_decimal(threshold)}")
        self.threshold = threshold
        self.modulus = modulus
        self.selection_order = selection_order or config.Config.SELECTION_ORDER
        if self.selection_order not in config.Config.SELECTION_ORDERS:
            raise ValueError(f"Unknown selection order {self.selection_order!r}")
        self.mode = arithmetic_mode(modulus)

    @classmethod
    def from_share_set(cls, share_set, selection_order: Optional[str] = None):
        return cls(share_set.threshold, share_set.modulus, selection_order)

    def select(self, shares: list) -> list:
        return select_shares(shares, self.threshold, self.selection_order)

    def recover_secret(self, shares: list):
        """Recover the secret from decoded shares using Lagrange interpolation"""
        if len(shares) < self.threshold:
            raise InsufficientShares(len(shares), self.threshold)

        selected = self.select(shares)
        logger.debug(
            "[Recovery] %s mode, %s order, using x=%s",
            self.mode.name, self.selection_order, [to_decimal(share.x) for share in selected],
        )
        secret = lagrange_at_zero(selected, self.threshold, self.mode)
        logger.info(
            "[Recovery] Recovered secret from %d of %d shares (%s)",
            len(selected), len(shares), self.mode.name,
        )
        return secret

    def recover_share_set(self, share_set):
        """Decode every share of the set, then recover"""
        return self.recover_secret(share_set.decode())
