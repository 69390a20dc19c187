"""
Test suite for sequential-thinking-tool.

This package contains tests covering:
- Unit tests for validation, rendering and confidence banding
- Session state and request processing
- Tool metadata and handler wiring
- MCP transport handlers
- Thread safety tests for concurrent usage
- Edge case and error handling tests
"""
