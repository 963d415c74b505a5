"""Shared output formatters for tool results.

This module provides functions to format parsed sc records into
human-readable strings for tool output.
"""

from sc_parser.models import CodeName
from sc_parser.models import FailureConfig
from sc_parser.models import LockInfo
from sc_parser.models import ServiceConfig
from sc_parser.models import ServiceRecord


def _code_name(value: CodeName) -> str:
    return f"{value.code} {value.name}".strip() if value.name else str(value.code)


def format_service_list(
    services: list[ServiceRecord],
    header: str = "=== Windows Services ===\n",
) -> str:
    """Format a service listing into a readable string.

    Args:
        services: List of ServiceRecord objects.
        header: Header text for the output.

    Returns:
        Formatted string representation.
    """
    lines = [header]
    lines.append(f"{'Name':<30} {'State':<20} {'Type':<26} {'PID':<8} {'Display Name'}")
    lines.append("-" * 110)

    for service in services:
        name = service.name
        if len(name) > 30:
            name = name[:27] + "..."

        pid = "" if service.pid is None else str(service.pid)
        lines.append(
            f"{name:<30} {_code_name(service.state):<20} {_code_name(service.type):<26} {pid:<8} "
            f"{service.display_name}"
        )

    running = sum(1 for service in services if service.state.running)
    lines.append(f"\n\nTotal services: {len(services)}")
    lines.append(f"Running: {running}")
    return "\n".join(lines)


def format_service_config(config: ServiceConfig, service_name: str = "") -> str:
    """Format a service configuration into a readable string.

    Args:
        config: ServiceConfig object.
        service_name: Optional service name for the header.

    Returns:
        Formatted string representation.
    """
    title = f"=== Service Configuration: {service_name} ===" if service_name else "=== Service Configuration ==="
    lines = [title, ""]
    lines.append(f"Display Name:       {config.display_name}")
    lines.append(f"Type:               {_code_name(config.type)}")
    lines.append(f"Start Type:         {_code_name(config.start_type)}")
    lines.append(f"Error Control:      {_code_name(config.error_control)}")
    lines.append(f"Binary Path:        {config.bin_path}")
    lines.append(f"Load Order Group:   {config.load_order_group}")
    lines.append(f"Tag:                {config.tag}")
    lines.append(f"Service Start Name: {config.service_start_name}")

    if config.dependencies:
        lines.append("Dependencies:")
        lines.extend(f"  - {dependency}" for dependency in config.dependencies)
    else:
        lines.append("Dependencies:       none")

    return "\n".join(lines)


def format_failure_config(config: FailureConfig) -> str:
    """Format a failure-recovery configuration into a readable string."""
    lines = ["=== Failure Recovery ===", ""]
    lines.append(f"Reset Period:    {config.reset_period} seconds")
    lines.append(f"Reboot Message:  {config.reboot_message}")
    lines.append(f"Command Line:    {config.command_line}")
    lines.append(f"Failure Actions: {config.failure_actions}")
    return "\n".join(lines)


def format_lock_info(lock: LockInfo) -> str:
    """Format service database lock status into a readable string."""
    lines = ["=== Service Database Lock ===", ""]
    if not lock.locked:
        lines.append("Locked: no")
        return "\n".join(lines)

    lines.append("Locked:   yes")
    lines.append(f"Owner:    {lock.owner}")
    lines.append(f"Duration: {lock.duration} seconds")
    return "\n".join(lines)
