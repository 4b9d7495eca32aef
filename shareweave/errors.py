# ----- errors.py -----
from shareweave.numtext import describe, to_decimal


class ShareWeaveError(Exception):
    """Base class for every failure raised while recovering a secret.

    `key` is the document key (the share's x) the failure belongs to, when
    there is one. The loader fills it in for errors raised below it.
    """
    def __init__(self, message, key=None):
        super().__init__(message)
        self.message = message
        self.key = key

    @property
    def kind(self):
        return type(self).__name__

    @property
    def key_text(self):
        if self.key is None:
            return None
        if isinstance(self.key, int):
            return to_decimal(self.key)
        return str(self.key)

    def __str__(self):
        if self.key is not None:
            return f"{self.message} (share {self.key_text})"
        return self.message


class InvalidDigit(ShareWeaveError):
    """A character is not a digit of the declared base."""
    def __init__(self, digits, position, base, key=None):
        self.digits = digits
        self.position = position
        self.base = base
        if digits == "":
            message = f"empty digit string for base {base}"
        else:
            message = (
                f"invalid digit {digits[position]!r} at position {position} "
                f"of {digits!r} for base {base}"
            )
        super().__init__(message, key)


class UnsupportedBase(ShareWeaveError):
    def __init__(self, base, key=None):
        self.base = base
        super().__init__(f"unsupported base {describe(base)}, expected 2..36", key)


class MalformedShare(ShareWeaveError):
    pass


class MalformedDocument(ShareWeaveError):
    pass


class DocumentUnavailable(ShareWeaveError):
    pass


class InsufficientShares(ShareWeaveError):
    def __init__(self, available, threshold):
        self.available = available
        self.threshold = threshold
        super().__init__(
            f"not enough shares provided (have {available}, need {to_decimal(threshold)})"
        )


class SingularPoints(ShareWeaveError):
    pass


class NotInvertible(ShareWeaveError):
    def __init__(self, value, modulus):
        self.value = value
        self.modulus = modulus
        super().__init__(f"{to_decimal(value)} has no inverse modulo {to_decimal(modulus)}")


class DivisionByZero(ShareWeaveError, ZeroDivisionError):
    pass


class InexactResult(UserWarning):
    """The rational interpolation did not land on an integer.

    Issued through `warnings`; the exact fractional secret is still returned.
    """
    def __init__(self, secret):
        self.secret = secret
        super().__init__(
            f"interpolated secret {secret} is not an integer; the shares may be "
            f"inconsistent or the dataset needs a modulus"
        )
