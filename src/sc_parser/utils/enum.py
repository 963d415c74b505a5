from enum import StrEnum


class HexPrefixPolicy(StrEnum):
    """How a ``0x`` prefix is applied to numeric fields printed in hexadecimal.

    ``ALWAYS`` reproduces what sc output consumers have historically relied
    on: the prefix is forced onto the raw value even when it already has one,
    which turns ``0x10`` into ``0x0x10`` (parsed as 0). ``IF_ABSENT`` only
    prefixes values that lack it.
    """

    ALWAYS = "always"
    IF_ABSENT = "if-absent"
