# ----- entities.py -----
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from shareweave.encoding import decode
from shareweave.errors import ShareWeaveError
from shareweave.fraction import Fraction

# A recovered secret: an int, or an exact Fraction when rational
# interpolation did not land on an integer.
Secret = Union[int, Fraction]


@dataclass(frozen=True)
class Share:
    """One decoded point (x, y) of the hidden polynomial."""
    x: int
    y: int

    def __iter__(self):
        return iter((self.x, self.y))


@dataclass(frozen=True)
class RawShare:
    """A share as it appears in the document, before base decoding."""
    x: int
    value: str
    base: int

    def decode(self) -> Share:
        try:
            y = decode(self.value, self.base)
        except ShareWeaveError as e:
            e.key = self.x
            raise
        return Share(self.x, y)


@dataclass(frozen=True)
class ShareSet:
    """
    Parameters and raw shares of one recovery, in declaration order.
    `modulus` selects the arithmetic: None means exact rationals,
    an int means the prime field Z/pZ.
    """
    threshold: int
    total: int
    modulus: Optional[int]
    shares: Tuple[RawShare, ...]

    @property
    def is_modular(self) -> bool:
        return self.modulus is not None

    def decode(self) -> list:
        """Decode every share; the first bad one aborts the whole set."""
        return [raw.decode() for raw in self.shares]
