"""Parsers for sc.exe output.

This module turns the raw text printed by ``sc`` commands into the records
defined in :mod:`sc_parser.models`. Every parser is a pure function of its
input: fields missing from the text fall back to defaults and no parser
raises on malformed output.
"""

import logging
import re

from sc_parser.extractors import boolean
from sc_parser.extractors import code_name_value
from sc_parser.extractors import extract_array
from sc_parser.extractors import extract_field
from sc_parser.extractors import extract_flags
from sc_parser.extractors import hex_value
from sc_parser.extractors import numeric
from sc_parser.extractors import to_code
from sc_parser.extractors import to_int
from sc_parser.models import CodeName
from sc_parser.models import FailureConfig
from sc_parser.models import LockInfo
from sc_parser.models import ServiceConfig
from sc_parser.models import ServiceRecord
from sc_parser.models import ServiceState
from sc_parser.models import ServiceStateCode


logger = logging.getLogger(__name__)

BANNER = "[SC]"

# Value tokens sc prints in English whatever the display language of the labels
SERVICE_TYPES = (
    "KERNEL_DRIVER",
    "FILE_SYSTEM_DRIVER",
    "WIN32_OWN_PROCESS",
    "WIN32_SHARE_PROCESS",
    "INTERACTIVE_PROCESS",
)
SERVICE_STATES = tuple(state.name for state in ServiceStateCode)

_BLANK_LINES = re.compile(r"\r?\n(?:[ \t]*\r?\n)+")
_BANNER_MESSAGE = re.compile(r"\s*\[SC\].*\s*(.*)")
_FIRST_LINE = re.compile(r"\s*(.*)")
_LEADING_CODE = re.compile(r"(?:0x)?\d*")
_FLAG_SEPARATOR = re.compile(r"[,\s]+")


def parse_error(output: str) -> str:
    """Extract a human-readable error message from sc output.

    Args:
        output: Raw output of a failed sc command, e.g.
            ``[SC] OpenService FAILED 1060:\\n\\nThe specified service does not exist...``

    Returns:
        The ERROR field if present, otherwise the line following a leading ``[SC]``
        banner, otherwise the whole output.
    """
    message = extract_field(output, "ERROR")
    if not message:
        match = _BANNER_MESSAGE.match(output)
        message = match.group(1).strip() if match else ""

    return message or output


def parse_display_name(output: str) -> str:
    """Parse sc GetDisplayName output (``Name = Windows Update``)."""
    return extract_field(output, "Name", output)


def parse_key_name(output: str) -> str:
    """Parse sc GetKeyName output (``Name = wuauserv``)."""
    return extract_field(output, "Name", output)


def parse_description(output: str) -> str:
    """Parse sc qdescription output."""
    return extract_field(output, "DESCRIPTION", output)


def parse_descriptor(output: str) -> str:
    """Parse sc sdshow output into its SDDL string (the first non-blank line)."""
    match = _FIRST_LINE.match(output)
    return match.group(1).strip() if match else output


def parse_lock(output: str) -> LockInfo:
    """Parse sc querylock output into LockInfo.

    Args:
        output: Raw output of sc querylock.

    Returns:
        LockInfo object.
    """
    return LockInfo(
        locked=boolean(output, "IsLocked", False),
        owner=extract_field(output, "LockOwner", ""),
        duration=numeric(output, "LockDuration", False, 0),
    )


def parse_failure_config(output: str) -> FailureConfig:
    """Parse sc qfailure output into FailureConfig.

    Args:
        output: Raw output of sc qfailure.

    Returns:
        FailureConfig object. Only the first FAILURE_ACTIONS line is kept.
    """
    return FailureConfig(
        reset_period=numeric(output, "RESET_PERIOD (in seconds)", False, 0),
        reboot_message=extract_field(output, "REBOOT_MESSAGE", ""),
        command_line=extract_field(output, "COMMAND_LINE", ""),
        failure_actions=extract_field(output, "FAILURE_ACTIONS", ""),
    )


def _code_name(output: str, name: str) -> CodeName:
    return CodeName(
        code=numeric(output, name, True, 0),
        name=code_name_value(output, name, ""),
    )


def parse_service_config(output: str) -> ServiceConfig:
    """Parse sc qc output into ServiceConfig.

    Args:
        output: Raw output of sc qc.

    Returns:
        ServiceConfig object.
    """
    return ServiceConfig(
        type=_code_name(output, "TYPE"),
        start_type=_code_name(output, "START_TYPE"),
        error_control=_code_name(output, "ERROR_CONTROL"),
        bin_path=extract_field(output, "BINARY_PATH_NAME", ""),
        load_order_group=extract_field(output, "LOAD_ORDER_GROUP", ""),
        tag=numeric(output, "TAG", False, 0),
        display_name=extract_field(output, "DISPLAY_NAME", ""),
        dependencies=extract_array(output, "DEPENDENCIES"),
        service_start_name=extract_field(output, "SERVICE_START_NAME", ""),
    )


def split_blocks(output: str) -> list[str]:
    """Split a listing into per-service blocks on runs of blank lines."""
    return _BLANK_LINES.split(output)


def _service_from_block(block: str) -> ServiceRecord:
    fields = {
        "name": extract_field(block, "SERVICE_NAME", ""),
        "display_name": extract_field(block, "DISPLAY_NAME", ""),
        "type": _code_name(block, "TYPE"),
        "state": ServiceState.from_code(
            numeric(block, "STATE", True, 0),
            code_name_value(block, "STATE", ""),
        ),
        "win32_exit_code": numeric(block, "WIN32_EXIT_CODE", False, 0),
        "service_exit_code": numeric(block, "SERVICE_EXIT_CODE", False, 0),
        "checkpoint": hex_value(block, "CHECKPOINT", 0),
        "wait_hint": hex_value(block, "WAIT_HINT", 0),
    }

    accepted = extract_flags(block, "STATE")
    if accepted:
        fields["accepted"] = tuple(flag for flag in _FLAG_SEPARATOR.split(accepted) if flag)

    # Only sc queryex prints PID and FLAGS
    pid = numeric(block, "PID", False, None)
    if pid is not None:
        fields["pid"] = pid

    flags = extract_field(block, "FLAGS")
    if flags:
        fields["flags"] = flags

    return ServiceRecord(**fields)


def parse_services_by_label(output: str) -> list[ServiceRecord]:
    """Parse an English sc query / sc queryex listing.

    Args:
        output: Raw listing output.

    Returns:
        One ServiceRecord per block containing a SERVICE_NAME field, in
        listing order.
    """
    return [_service_from_block(block) for block in split_blocks(output) if "SERVICE_NAME" in block]


def _split_code_name(value: str, token: str) -> tuple[int, str]:
    """Split ``4  RUNNING`` into its code and the recognised token."""
    code = to_code(_LEADING_CODE.match(value.strip()).group(), hex_hint=True)
    return code or 0, token


def _match_token(value: str, tokens: tuple[str, ...]) -> str | None:
    for token in tokens:
        if token in value:
            return token

    return None


def parse_services_by_value(output: str) -> list[ServiceRecord]:
    """Parse a service listing without relying on field labels.

    Localized Windows installations translate the field labels of sc query
    but keep the service type and state names in English. Each block is read
    positionally instead: the first line holds the service name, the type and
    state lines are recognised by their values, and the PID line ends the
    block.

    Args:
        output: Raw listing output.

    Returns:
        One ServiceRecord per block with a non-empty name, in listing order.
    """
    services = []
    for block in split_blocks(output):
        fields = {}
        name = None

        for line in block.splitlines():
            line = line.strip()
            if not line or line.startswith(BANNER):
                continue

            label, separator, value = line.partition(":")
            if name is None:
                name = value.strip()
                continue

            if not separator:
                continue

            if label.strip().casefold() == "pid":
                pid = to_int(value)
                if pid is not None:
                    fields["pid"] = pid
                # Diagnostic lines after PID are not part of the service
                break

            if token := _match_token(value, SERVICE_TYPES):
                code, type_name = _split_code_name(value, token)
                fields["type"] = CodeName(code=code, name=type_name)

            if token := _match_token(value, SERVICE_STATES):
                code, state_name = _split_code_name(value, token)
                fields["state"] = ServiceState.from_code(code, state_name)

        if name:
            services.append(ServiceRecord(name=name, **fields))

    return services


def parse_service_list(output: str) -> list[ServiceRecord]:
    """Parse sc query / sc queryex output into ServiceRecord objects.

    Args:
        output: Raw listing output.

    Returns:
        List of ServiceRecord objects; empty when nothing recognisable was found.
    """
    services = parse_services_by_label(output)
    if services:
        return services

    logger.debug("No SERVICE_NAME fields found, parsing service listing by value")
    return parse_services_by_value(output)
