"""
Sequential Thinking Tool

A stateful thinking tool for LLM agents: each call records one validated
thought, tracks branches and confidence metadata, and returns a JSON status
envelope.

Usage:
    from sequential_thinking import TOOL_SPECS, create_handlers

    # Add to your LLM tools
    tools = [
        *TOOL_SPECS,
        # ... other tools
    ]

    # One handler mapping per session
    handlers = create_handlers()

    # Handle tool calls
    if tool_name in handlers:
        result = handlers[tool_name](**tool_args)

Or serve it over MCP stdio:
    python -m sequential_thinking
"""

from .config import ServerConfig
from .core import (
    ProcessResult,
    ThoughtProcessor,
    ThoughtSession,
    create_handlers,
    create_sequential_thinking_handler,
)
from .models import CalibrationMetrics, FirstPrinciples, ThoughtRecord
from .rendering import confidence_emphasis, confidence_level_label, format_thought
from .schema import SEQUENTIAL_THINKING_TOOL, TOOL_NAME
from .validators import ThoughtValidationError, ThoughtValidator

# Tool specifications compatible with Converse API format
TOOL_SPECS = [
    {
        "toolSpec": {
            "name": SEQUENTIAL_THINKING_TOOL["name"],
            "description": SEQUENTIAL_THINKING_TOOL["description"],
            "inputSchema": {
                "json": SEQUENTIAL_THINKING_TOOL["inputSchema"]
            }
        }
    }
]

# Convenience exports
__all__ = [
    "TOOL_SPECS",
    "TOOL_NAME",
    "SEQUENTIAL_THINKING_TOOL",
    "ServerConfig",
    "ThoughtSession",
    "ThoughtProcessor",
    "ProcessResult",
    "ThoughtRecord",
    "CalibrationMetrics",
    "FirstPrinciples",
    "ThoughtValidator",
    "ThoughtValidationError",
    "create_handlers",
    "create_sequential_thinking_handler",
    "format_thought",
    "confidence_level_label",
    "confidence_emphasis",
]

# Version info
__version__ = "0.2.0"
