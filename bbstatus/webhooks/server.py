"""
Configuration-time HTTP server.
"""

from aiohttp import web

from bbstatus.core.logging import get_logger
from bbstatus.webhooks.credentials import handle_check_credentials

logger = get_logger(__name__)


def create_app() -> web.Application:
    """Build the aiohttp application with its routes."""
    app = web.Application()
    app.router.add_post("/credentials/check", handle_check_credentials)
    return app


async def start_server(host: str = "0.0.0.0", port: int = 8081) -> web.AppRunner:
    """
    Start the credential check server.
    
    Args:
        host: Host to bind to
        port: Port to bind to

    Returns:
        Runner to clean up on shutdown
    """
    runner = web.AppRunner(create_app())
    await runner.setup()
    
    site = web.TCPSite(runner, host, port)
    await site.start()
    
    logger.info(f"Credential check server started on {host}:{port}")
    return runner
