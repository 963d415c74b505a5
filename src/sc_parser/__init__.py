"""sc-parser - Typed records from the text output of the Windows service control tool."""

import importlib.metadata

from sc_parser.parsers import parse_description
from sc_parser.parsers import parse_descriptor
from sc_parser.parsers import parse_display_name
from sc_parser.parsers import parse_error
from sc_parser.parsers import parse_failure_config
from sc_parser.parsers import parse_key_name
from sc_parser.parsers import parse_lock
from sc_parser.parsers import parse_service_config
from sc_parser.parsers import parse_service_list


__version__ = importlib.metadata.version("sc-parser")

__all__ = [
    "parse_description",
    "parse_descriptor",
    "parse_display_name",
    "parse_error",
    "parse_failure_config",
    "parse_key_name",
    "parse_lock",
    "parse_service_config",
    "parse_service_list",
]
