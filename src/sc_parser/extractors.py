"""Field extraction primitives for sc.exe output.

sc prints every field as ``LABEL<spaces>[=|:]<spaces>VALUE``. The functions
here locate a field by its label and return the raw or typed value, falling
back to a caller-supplied default when the field is missing. None of them
raise on malformed input.
"""

import functools
import re

from sc_parser.config import CONFIG
from sc_parser.utils.enum import HexPrefixPolicy


# Leading integer as read by sc consumers: optional sign, then either a
# 0x-prefixed run of hex digits or a run of decimal digits
_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|(\d+))")

# One ": value" segment of a multi-line array field
_ARRAY_ITEM = re.compile(r":[ \t]*(.*)")


@functools.lru_cache(maxsize=256)
def _field(name: str, rest: str, flags: int = 0) -> re.Pattern[str]:
    """Compile `<name><rest>` with the label matched literally."""
    return re.compile(re.escape(name) + rest, flags)


def _label(name: str, value: str, flags: int = 0) -> re.Pattern[str]:
    """Compile `<name> [=:] <value>` with the label matched literally."""
    return _field(name, r"\s*[=:]" + value, flags)


def _search(text: str, pattern: re.Pattern[str]) -> str | None:
    """Return the stripped first group of the first match, or None."""
    match = pattern.search(text)
    if match is None or match.group(1) is None:
        return None

    return match.group(1).strip()


def to_int(value: str) -> int | None:
    """Parse the leading integer of a string.

    A ``0x`` prefix switches to base 16. Parsing stops at the first character
    that is not a digit, so ``"1077  (0x435)"`` gives 1077 and ``"0x0x10"``
    gives 0.

    Args:
        value: Raw field value.

    Returns:
        The parsed integer, or None when the value has no leading digits.
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return None

    sign, hex_digits, digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        number = int(hex_digits, 16)
    else:
        number = int(digits)

    return -number if sign == "-" else number


def to_code(value: str, hex_hint: bool = False, policy: HexPrefixPolicy | None = None) -> int | None:
    """Parse an enumeration code, optionally printed in hexadecimal without a prefix.

    With `hex_hint` the value is prefixed with ``0x`` according to `policy`
    (CONFIG.hex_prefix_policy when not given) before parsing.
    """
    if hex_hint:
        policy = HexPrefixPolicy(policy or CONFIG.hex_prefix_policy)
        if policy is HexPrefixPolicy.ALWAYS or not value.startswith("0x"):
            value = f"0x{value}"

    return to_int(value)


def extract_field(text: str, name: str, default: str | None = None) -> str | None:
    """Extract the value of a ``NAME : value`` or ``NAME = value`` field.

    Args:
        text: Raw sc output.
        name: Field label, matched literally.
        default: Value returned when the field is absent.

    Returns:
        The stripped value on the first line of the field, or default.
    """
    value = _search(text, _label(name, r"(.*)"))
    return default if value is None else value


def extract_flags(text: str, name: str) -> str | None:
    """Extract the parenthesised list that follows a field's value.

    sc prints the controls a service accepts beneath its STATE line::

        STATE              : 4  RUNNING
                                (STOPPABLE, NOT_PAUSABLE, ACCEPTS_SHUTDOWN)

    Args:
        text: Raw sc output.
        name: Field label, matched literally.

    Returns:
        The text between the parentheses, or None if no list follows.
    """
    pattern = _field(name, r"\s*:\s.*\s*\((.*)\)")
    return _search(text, pattern)


def extract_array(text: str, name: str) -> list[str]:
    """Extract a field whose values continue on ``: value`` lines.

    Example::

        DEPENDENCIES       : rpcss
                           : http

    Args:
        text: Raw sc output.
        name: Field label, matched literally.

    Returns:
        Non-empty values in order; an empty list when the field is absent.
    """
    pattern = _field(name, r"((?:\s*:.*)*)")
    block = _search(text, pattern)
    if not block:
        return []

    values = []
    for match in _ARRAY_ITEM.finditer(block):
        value = match.group(1).strip()
        if value:
            values.append(value)

    return values


def numeric(
    text: str,
    name: str,
    hex_hint: bool = False,
    default: int | None = None,
    policy: HexPrefixPolicy | None = None,
) -> int | None:
    """Extract a numeric field.

    The value is the optional ``0x`` prefix and decimal digits right after
    the label. Fields printed in hexadecimal without a prefix (TYPE, STATE,
    START_TYPE, ERROR_CONTROL) are read with `hex_hint`, which prefixes the
    value with ``0x`` according to `policy` before parsing.

    Args:
        text: Raw sc output.
        name: Field label, matched literally.
        hex_hint: Treat the value as hexadecimal.
        default: Value returned when the field is absent or has no digits.
        policy: Prefixing rule for hexadecimal values. Defaults to
            CONFIG.hex_prefix_policy.

    Returns:
        The parsed integer, or default.
    """
    value = _search(text, _label(name, r"\s*((?:0x)?\d*)"))
    if value is None:
        return default

    number = to_code(value, hex_hint, policy)
    return default if number is None else number


def hex_value(text: str, name: str, default: int | None = None) -> int | None:
    """Extract a field printed as ``0x...`` (CHECKPOINT, WAIT_HINT)."""
    value = extract_field(text, name)
    if value is None:
        return default

    number = to_int(value)
    return default if number is None else number


def boolean(text: str, name: str, default: bool = False) -> bool:
    """Extract a ``TRUE``/``FALSE`` field.

    Any recognised token counts as present and yields True; only a missing
    field yields default.
    """
    value = _search(text, _label(name, r"\s*(true|false)", re.IGNORECASE))
    return default if value is None else bool(value)


def code_name_value(text: str, name: str, default: str | None = None) -> str | None:
    """Extract the name half of a ``<code>  <NAME>`` field.

    ``TYPE : 20  WIN32_SHARE_PROCESS`` gives ``WIN32_SHARE_PROCESS``.
    """
    value = _search(text, _label(name, r"\s*\d*\s*(.*)"))
    return default if value is None else value
