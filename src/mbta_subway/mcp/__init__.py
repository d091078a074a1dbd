"""MCP (Model Context Protocol) server module for MBTA subway info.

This module provides an MCP server implementation that exposes subway route,
transfer station and trip questions through the Model Context Protocol.
"""

from .server import SubwayMCPServer, main

__all__ = ["SubwayMCPServer", "main"]
