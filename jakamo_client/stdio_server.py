"""Stdio transport server for exposing the Jakamo tools to an MCP client.

Usage:
    python -m jakamo_client.stdio_server

Environment Variables (required, either):
    JAKAMO_USERNAME and JAKAMO_PASSWORD - HTTP Basic credentials
    JAKAMO_AUTHORIZATION - Full Authorization header value

Environment Variables (optional):
    JAKAMO_BASE_URL - API base URL (defaults to the demo environment)
    JAKAMO_LOG_LEVEL - Logging level (default: INFO)
    JAKAMO_LOG_FILE - Log file path with rotation
"""

from .server import server


def main():
    """Run the MCP server using stdio transport."""
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
