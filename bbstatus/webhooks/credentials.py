"""
Credential validation handler used by the notifier configuration form.
"""

import asyncio
from aiohttp import web

from bbstatus.core.config import settings
from bbstatus.core.logging import get_logger
from bbstatus.services.bitbucket import BitbucketClient

logger = get_logger(__name__)


async def handle_check_credentials(request: web.Request) -> web.Response:
    """Check an OAuth key/secret pair by attempting the token grant."""
    try:
        payload = await request.json()
    except ValueError:
        return web.json_response({"ok": False, "message": "Invalid JSON"}, status=400)

    if not isinstance(payload, dict):
        return web.json_response({"ok": False, "message": "Expected a JSON object"}, status=400)

    client = BitbucketClient(
        str(payload.get("api_key") or "").strip(),
        str(payload.get("api_secret") or "").strip(),
        api_url=settings.api_url,
        token_url=settings.token_url,
        timeout=settings.http_timeout,
    )
    # httpx.Client is blocking
    check = await asyncio.to_thread(client.check_credentials)

    if not check.ok:
        logger.info(f"Credential check failed: {check.message}")
    return web.json_response(
        {"ok": check.ok, "message": check.message},
        status=200 if check.ok else 400,
    )
