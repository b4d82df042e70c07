"""Timezone Finder - an MCP server that tells clients which timezone they are in."""

__version__ = "1.0.0"
