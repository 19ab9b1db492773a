"""Entrypoint for running the tour-planner MCP server.

Usage:
  python run_mcp_server.py [--host 127.0.0.1] [--port 8765] [--catalog path/to/catalog.json]

Or via MCP host config (e.g., Claude Desktop) pointing to this script.
"""
from mcp_tools_tours.mcp.server import main

if __name__ == "__main__":
    main()
