from sc_parser.utils.enum import HexPrefixPolicy
from sc_parser.utils.format import truncate


__all__ = [
    "HexPrefixPolicy",
    "truncate",
]
