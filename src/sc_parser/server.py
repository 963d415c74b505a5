"""MCP server exposing the sc output parsers using FastMCP."""

import logging

from mcp.server.fastmcp import FastMCP


logger = logging.getLogger("sc-parser")


# Initialize FastMCP server
mcp = FastMCP("sc-output-parser")

from sc_parser.tools import *  # noqa: E402, F403


def main():
    mcp.run()
