"""MCP server for Jakamo: tool registration."""

from __future__ import annotations

from fastmcp import FastMCP

from .resources import purchase_orders, sales_orders
from .utils.logging import setup_logging

setup_logging()


def create_mcp_server() -> FastMCP:
    """Create and configure the FastMCP server with all Jakamo tools."""
    mcp = FastMCP("jakamo-client")

    # -- Tools: sales orders ------------------------------------------------
    mcp.tool()(sales_orders.jakamo_get_sales_order)
    mcp.tool()(sales_orders.jakamo_remove_sales_order)
    mcp.tool()(sales_orders.jakamo_send_order_response)
    mcp.tool()(sales_orders.jakamo_confirm_all_changes)

    # -- Tools: purchase orders ---------------------------------------------
    mcp.tool()(purchase_orders.jakamo_send_purchase_order)
    mcp.tool()(purchase_orders.jakamo_update_purchase_order)
    mcp.tool()(purchase_orders.jakamo_cancel_purchase_order)
    mcp.tool()(purchase_orders.jakamo_purchase_order_received)
    mcp.tool()(purchase_orders.jakamo_get_order_response)

    return mcp


# Default server instance for stdio transport
server = create_mcp_server()
