"""
Command line entry points.
"""

import argparse
import asyncio
import json
import sys

from bbstatus.core.config import settings
from bbstatus.core.logging import setup_logging, get_logger
from bbstatus.models.build import Build
from bbstatus.notifier import BitbucketBuildStatusNotifier
from bbstatus.services.bitbucket import BitbucketClient
from bbstatus.webhooks.server import start_server

logger = get_logger(__name__)


def load_build(path: str) -> Build:
    """Read a build snapshot written by the orchestrator adapter."""
    with open(path, encoding="utf-8") as f:
        return Build.from_dict(json.load(f))


def run_hook(event: str, path: str) -> int:
    """Run the start or finish hook; always exits 0 so the build goes on."""
    try:
        build = load_build(path)
    except (OSError, ValueError, KeyError) as e:
        logger.info(f"Could not read build snapshot {path}: {e}")
        print(f"Bitbucket notify on {event} failed: {e}")
        return 0

    notifier = BitbucketBuildStatusNotifier.from_settings(settings)
    if event == "start":
        notifier.on_build_start(build, sys.stdout)
    else:
        notifier.on_build_finish(build, sys.stdout)
    return 0


def check_credentials() -> int:
    client = BitbucketClient(
        settings.api_key,
        settings.api_secret,
        api_url=settings.api_url,
        token_url=settings.token_url,
        timeout=settings.http_timeout,
    )
    check = client.check_credentials()
    print("Bitbucket OAuth credentials are valid" if check.ok else check.message)
    return 0 if check.ok else 1


async def serve() -> None:
    """Run the credential check server until cancelled."""
    runner = await start_server(settings.server_host, settings.server_port)

    stop_signal = asyncio.Event()
    try:
        await stop_signal.wait()
    except asyncio.CancelledError:
        pass
    finally:
        await runner.cleanup()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bbstatus",
        description="Report CI build status to Bitbucket commits.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for event in ("start", "finish"):
        hook = subparsers.add_parser(event, help=f"Send the build {event} status")
        hook.add_argument("snapshot", help="Path to the build snapshot JSON")

    subparsers.add_parser("check-credentials", help="Validate the configured OAuth consumer")
    subparsers.add_parser("serve", help="Run the credential check HTTP endpoint")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(settings.log_level)

    if args.command in ("start", "finish"):
        return run_hook(args.command, args.snapshot)
    if args.command == "check-credentials":
        return check_credentials()

    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        pass
    return 0
