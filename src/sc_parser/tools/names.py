"""Tools for single-value sc output: names, descriptions, descriptors and errors."""

from mcp.types import ToolAnnotations

from sc_parser.audit import log_tool_call
from sc_parser.parsers import parse_description
from sc_parser.parsers import parse_descriptor
from sc_parser.parsers import parse_display_name
from sc_parser.parsers import parse_error
from sc_parser.parsers import parse_key_name
from sc_parser.server import mcp
from sc_parser.utils.types import ScOutput


@mcp.tool(
    title="Parse error message",
    description="Extract the error message from the output of a failed sc command.",
    annotations=ToolAnnotations(readOnlyHint=True),
)
@log_tool_call
def parse_error_message(output: ScOutput) -> str:
    return parse_error(output)


@mcp.tool(
    title="Get display name",
    description="Extract the display name from the output of 'sc GetDisplayName <service>'.",
    annotations=ToolAnnotations(readOnlyHint=True),
)
@log_tool_call
def get_display_name(output: ScOutput) -> str:
    return parse_display_name(output)


@mcp.tool(
    title="Get key name",
    description="Extract the service key name from the output of 'sc GetKeyName <display name>'.",
    annotations=ToolAnnotations(readOnlyHint=True),
)
@log_tool_call
def get_key_name(output: ScOutput) -> str:
    return parse_key_name(output)


@mcp.tool(
    title="Get description",
    description="Extract the description from the output of 'sc qdescription <service>'.",
    annotations=ToolAnnotations(readOnlyHint=True),
)
@log_tool_call
def get_description(output: ScOutput) -> str:
    return parse_description(output)


@mcp.tool(
    title="Get security descriptor",
    description="Extract the SDDL security descriptor from the output of 'sc sdshow <service>'.",
    annotations=ToolAnnotations(readOnlyHint=True),
)
@log_tool_call
def get_security_descriptor(output: ScOutput) -> str:
    return parse_descriptor(output)
