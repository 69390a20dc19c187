"""
MCP stdio transport for the sequential thinking tool.

stdout carries the protocol; rendered thoughts and diagnostics go to stderr.
"""
import asyncio
import logging
import sys
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .config import ServerConfig
from .core import ThoughtProcessor, ThoughtSession
from .schema import SEQUENTIAL_THINKING_TOOL, TOOL_NAME

SERVER_NAME = "sequential-thinking-server"
SERVER_VERSION = "0.2.0"

logger = logging.getLogger(__name__)


class ToolCallError(Exception):
    """
    Raised from call_tool to produce an MCP error result.

    The server turns the exception message into the single text item of a
    result flagged with isError.
    """
    pass


ListToolsHandler = Callable[[], Awaitable[List[Tool]]]
CallToolHandler = Callable[[str, Optional[Dict[str, Any]]], Awaitable[List[TextContent]]]


def build_handlers(processor: ThoughtProcessor) -> Tuple[ListToolsHandler, CallToolHandler]:
    """
    Build the list_tools and call_tool handlers for a processor.

    Args:
        processor: Processor holding the session for this server

    Returns:
        (list_tools, call_tool) coroutine functions
    """
    async def list_tools() -> List[Tool]:
        return [Tool(**SEQUENTIAL_THINKING_TOOL)]

    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        if name != TOOL_NAME:
            raise ToolCallError(f"Unknown tool: {name}")

        result = processor.process_thought(arguments if arguments is not None else {})
        if result.is_error:
            raise ToolCallError(result.text)
        return [TextContent(type="text", text=result.text)]

    return list_tools, call_tool


def create_server(processor: ThoughtProcessor) -> Server:
    """Create an MCP server exposing the sequentialthinking tool."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)
    list_tools, call_tool = build_handlers(processor)
    server.list_tools()(list_tools)
    # Argument checking belongs to ThoughtValidator so its messages reach the caller
    server.call_tool(validate_input=False)(call_tool)
    return server


async def run_server(config: ServerConfig) -> None:
    """Serve one session over stdio until the client disconnects."""
    processor = ThoughtProcessor(ThoughtSession(), config=config)
    server = create_server(processor)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Sequential Thinking MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def configure_logging(stream=None) -> None:
    """Send all log records to stderr, unformatted, so thought blocks print verbatim."""
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.INFO)


def main() -> None:
    """Console entry point."""
    configure_logging()
    config = ServerConfig.from_env()
    try:
        asyncio.run(run_server(config))
    except Exception as e:
        logger.error(f"Fatal error running server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
