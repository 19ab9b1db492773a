"""mcp_server_tours: tour-planner MCP server.

See mcp_tools_tours for the planning services.
"""
