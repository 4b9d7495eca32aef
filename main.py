# ----- main.py -----
import argparse
import logging
import sys
import warnings

import config
from shamir import ShamirSecretRecovery
from shareweave.errors import InexactResult, ShareWeaveError
from shareweave.loader import load_share_set
from shareweave.numtext import from_decimal, to_decimal
from shareweave.presenter import describe_failure, render_secret, secret_fingerprint, share_table

logger = logging.getLogger("shareweave.cli")


def _modulus(text):
    try:
        value = from_decimal(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"modulus must be a decimal integer, got {text!r}") from None
    if value <= 1:
        raise argparse.ArgumentTypeError(f"modulus must be greater than 1, got {to_decimal(value)}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog="shareweave",
        description="Recover a Shamir secret P(0) from a JSON share document.",
    )
    parser.add_argument("document", help="path or http(s) URL of the share document")
    parser.add_argument(
        "--order",
        choices=config.Config.SELECTION_ORDERS,
        default=config.Config.SELECTION_ORDER,
        help="which k shares to use when more are supplied (default: %(default)s)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--modulus", type=_modulus, help="prime modulus, overrides keys.p")
    mode.add_argument("--rational", action="store_true",
                      help="ignore keys.p and interpolate over exact rationals")
    parser.add_argument("--strict", action="store_true",
                        help="exit non-zero when the secret is not an integer")
    parser.add_argument("--show-shares", action="store_true",
                        help="print the decoded shares to stderr")
    parser.add_argument("--fingerprint", action="store_true",
                        help="print a SHA-256 fingerprint of the secret to stderr")
    parser.add_argument("--log-level", default=config.Config.LOG_LEVEL,
                        type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def _select_modulus(args, share_set):
    if args.rational:
        return None
    if args.modulus is not None:
        return args.modulus
    return share_set.modulus


def run(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.Config.LOG_FORMAT, stream=sys.stderr)

    try:
        share_set = load_share_set(args.document)
        recovery = ShamirSecretRecovery(
            share_set.threshold, _select_modulus(args, share_set), args.order
        )
        shares = share_set.decode()
        if args.show_shares:
            print(share_table(share_set.shares, shares, recovery.select(shares)), file=sys.stderr)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", InexactResult)
            secret = recovery.recover_secret(shares)
    except ShareWeaveError as e:
        logger.debug("[CLI] Recovery aborted", exc_info=True)
        print(describe_failure(e), file=sys.stderr)
        return 1

    inexact = False
    for w in caught:
        if issubclass(w.category, InexactResult):
            inexact = True
            print(f"InexactResult: {w.message}", file=sys.stderr)
        else:
            warnings.showwarning(w.message, w.category, w.filename, w.lineno)

    print(render_secret(secret))
    if args.fingerprint:
        print(f"sha256:{secret_fingerprint(secret)}", file=sys.stderr)
    if inexact and args.strict:
        return 1
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
