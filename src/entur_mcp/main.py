"""Main entry point for the Entur MCP server."""

import asyncio
import logging
import sys

from entur_mcp.adapters.config import AppConfig
from entur_mcp.adapters.mcp import create_mcp_server
from entur_mcp.bootstrap import create_session, create_transit_search_service

# Configure logging; stdout is reserved for the stdio transport
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    logging.getLogger().setLevel(config.log_level)

    async with create_session(config) as session:
        service = create_transit_search_service(config, session)
        mcp = create_mcp_server(config, service)

        logger.info(f"Starting {config.server_name} ({config.mcp_transport} transport)")
        if config.mcp_transport == "stdio":
            await mcp.run_stdio_async()
        elif config.mcp_transport == "sse":
            logger.info(f"Entur MCP server: http://{config.host}:{config.port}/sse")
            await mcp.run_sse_async()
        else:
            logger.info(f"Entur MCP server: http://{config.host}:{config.port}/mcp")
            await mcp.run_streamable_http_async()


def cli_main() -> None:
    """Synchronous entry point for the server command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    cli_main()
