"""Tools for sc query, sc qc, sc qfailure and sc querylock output."""

import json
import typing as t

from mcp.types import ToolAnnotations
from pydantic import Field

from sc_parser.audit import log_tool_call
from sc_parser.formatters import format_failure_config
from sc_parser.formatters import format_lock_info
from sc_parser.formatters import format_service_config
from sc_parser.formatters import format_service_list
from sc_parser.parsers import parse_failure_config
from sc_parser.parsers import parse_lock
from sc_parser.parsers import parse_service_config
from sc_parser.parsers import parse_service_list
from sc_parser.server import mcp
from sc_parser.utils.types import ScOutput


@mcp.tool(
    title="Parse services",
    description="Summarize the services listed in the output of 'sc query' or 'sc queryex'.",
    annotations=ToolAnnotations(readOnlyHint=True),
)
@log_tool_call
def parse_services(output: ScOutput) -> str:
    """
    Parse a service listing into a table.
    """
    return format_service_list(parse_service_list(output))


@mcp.tool(
    title="Parse services as JSON",
    description="Convert the output of 'sc query' or 'sc queryex' into a JSON array of service records.",
    annotations=ToolAnnotations(readOnlyHint=True),
)
@log_tool_call
def parse_services_json(output: ScOutput) -> str:
    """
    Parse a service listing into JSON records with camelCase keys.
    """
    services = parse_service_list(output)
    return json.dumps([service.model_dump(by_alias=True, exclude_none=True) for service in services])


@mcp.tool(
    title="Parse service configuration",
    description="Summarize the output of 'sc qc <service>'.",
    annotations=ToolAnnotations(readOnlyHint=True),
)
@log_tool_call
def parse_config(
    output: ScOutput,
    service_name: t.Annotated[str, Field(description="Name of the service, used in the heading")] = "",
) -> str:
    """
    Parse a service configuration.
    """
    return format_service_config(parse_service_config(output), service_name)


@mcp.tool(
    title="Parse failure recovery",
    description="Summarize the output of 'sc qfailure <service>'.",
    annotations=ToolAnnotations(readOnlyHint=True),
)
@log_tool_call
def parse_failure_settings(output: ScOutput) -> str:
    return format_failure_config(parse_failure_config(output))


@mcp.tool(
    title="Parse lock status",
    description="Summarize the output of 'sc querylock'.",
    annotations=ToolAnnotations(readOnlyHint=True),
)
@log_tool_call
def parse_lock_status(output: ScOutput) -> str:
    return format_lock_info(parse_lock(output))
