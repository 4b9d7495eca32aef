# ----- loader.py -----
"""
Turns a share document into a ShareSet.

    {
      "keys": {"n": 4, "k": 3, "p": "2147483647"},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2", "value": "111"},
      ...
    }

`keys.p` is optional; without it the secret is recovered over the rationals.
Share keys must be canonical decimal ("7", "-3"; not "07" or "+7") so that
distinct keys always name distinct x values.
"""
import json
import logging
import re
from collections.abc import Mapping

import requests

import config
from shareweave.entities import RawShare, ShareSet
from shareweave.errors import DocumentUnavailable, MalformedDocument, MalformedShare
from shareweave.numtext import describe, from_decimal, to_decimal

logger = logging.getLogger(__name__)

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+", re.ASCII)
_SHARE_KEY = re.compile(r"0|-?[1-9][0-9]*", re.ASCII)


def _parse_integer(value, pattern=_INTEGER_TEXT):
    """Accept a JSON integer or decimal text; None for anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and pattern.fullmatch(value):
        return from_decimal(value)
    return None


def _parse_parameters(document):
    params = document.get(config.Config.PARAMETERS_KEY)
    if not isinstance(params, Mapping):
        raise MalformedDocument(f"missing '{config.Config.PARAMETERS_KEY}' object")

    threshold = _parse_integer(params.get("k"))
    if threshold is None or threshold < 1:
        raise MalformedDocument(f"threshold k must be an integer >= 1, got {describe(params.get('k'))}")

    total = _parse_integer(params.get("n"))
    if total is None:
        raise MalformedDocument(f"share count n must be an integer, got {describe(params.get('n'))}")

    modulus = None
    raw_modulus = params.get("p")
    if raw_modulus is not None and raw_modulus != "":
        modulus = _parse_integer(raw_modulus)
        if modulus is None or modulus <= 1:
            raise MalformedDocument(f"modulus p must be an integer > 1, got {describe(raw_modulus)}")

    return threshold, total, modulus


def _parse_share(key, entry):
    x = _parse_integer(key, _SHARE_KEY)
    if x is None:
        raise MalformedShare(f"share key {key!r} is not a canonical decimal integer", key=key)
    if not isinstance(entry, Mapping):
        raise MalformedShare("share entry must be an object", key=key)

    value = entry.get("value")
    if not isinstance(value, str) or not value:
        raise MalformedShare(f"missing or invalid 'value' field: {describe(value)}", key=key)

    base = _parse_integer(entry.get("base"))
    if base is None:
        raise MalformedShare(f"missing or invalid 'base' field: {describe(entry.get('base'))}", key=key)

    return RawShare(x, value, base)


def parse_document(document) -> ShareSet:
    """Validate the document shape and build a ShareSet in declaration order."""
    if not isinstance(document, Mapping):
        raise MalformedDocument("share document must be a JSON object")

    threshold, total, modulus = _parse_parameters(document)
    shares = tuple(
        _parse_share(key, entry)
        for key, entry in document.items()
        if key != config.Config.PARAMETERS_KEY
    )

    if total < threshold:
        logger.warning("[Loader] Declared n=%s is below threshold k=%s", to_decimal(total), to_decimal(threshold))
    if len(shares) > total:
        logger.warning("[Loader] Document holds %d shares but declares n=%s", len(shares), to_decimal(total))
    logger.info(
        "[Loader] Parsed %d shares, k=%s, mode=%s",
        len(shares), to_decimal(threshold), "modular" if modulus is not None else "rational",
    )
    return ShareSet(threshold=threshold, total=total, modulus=modulus, shares=shares)


def _is_url(source):
    return str(source).startswith(("http://", "https://"))


def load_document(source) -> dict:
    """Read a share document from a file path or an http(s) URL."""
    try:
        if _is_url(source):
            response = requests.get(source, timeout=config.Config.REQUEST_TIMEOUT)
            response.raise_for_status()
            text = response.text
        else:
            with open(source, "r", encoding="utf-8") as f:
                text = f.read()
    except requests.exceptions.RequestException as e:
        raise DocumentUnavailable(f"could not fetch {source}: {e}") from e
    except OSError as e:
        raise DocumentUnavailable(f"could not read {source}: {e}") from e

    try:
        # the default int() parse_int refuses literals past 4300 digits
        document = json.loads(text, parse_int=from_decimal)
    except json.JSONDecodeError as e:
        raise MalformedDocument(f"{source} is not valid JSON: {e}") from e
    if not isinstance(document, dict):
        raise MalformedDocument(f"{source} must contain a JSON object")
    logger.debug("[Loader] Read document from %s", source)
    return document


def load_share_set(source) -> ShareSet:
    return parse_document(load_document(source))
