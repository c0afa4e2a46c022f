"""
Build lifecycle hooks that report status to Bitbucket.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from bbstatus.core.config import Settings
from bbstatus.core.logging import console_print, get_logger
from bbstatus.models.build import Build
from bbstatus.models.status import BuildState, StatusResource
from bbstatus.services.bitbucket import BitbucketClient
from bbstatus.services.scm import BITBUCKET_HOST, resolve_build_revisions, resolve_repository_coordinates
from bbstatus.services.status import build_status_resources, create_build_status

logger = get_logger(__name__)


@dataclass
class NotificationResult:
    """Outcome of one notification attempt for one build event."""

    state: BuildState | None = None
    sent: list[StatusResource] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BitbucketBuildStatusNotifier:
    """Sends in-progress and final build states to Bitbucket."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        notify_start: bool = True,
        notify_finish: bool = True,
        client: BitbucketClient | None = None,
        host: str = BITBUCKET_HOST,
    ):
        self.api_key = api_key
        self.api_secret = api_secret
        self.notify_start = notify_start
        self.notify_finish = notify_finish
        self.host = host
        self._client = client or BitbucketClient(api_key, api_secret)

    @classmethod
    def from_settings(cls, settings: Settings) -> "BitbucketBuildStatusNotifier":
        client = BitbucketClient(
            settings.api_key,
            settings.api_secret,
            api_url=settings.api_url,
            token_url=settings.token_url,
            timeout=settings.http_timeout,
        )
        return cls(
            settings.api_key,
            settings.api_secret,
            notify_start=settings.notify_start,
            notify_finish=settings.notify_finish,
            client=client,
            host=settings.hosting_domain,
        )

    def on_build_start(self, build: Build, console: TextIO | None = None) -> bool:
        """Report the running build. Never fails the build."""
        if not self.notify_start:
            return True
        logger.info("Bitbucket notify on start")
        self.notify(build, console, event="start")
        return True

    def on_build_finish(self, build: Build, console: TextIO | None = None) -> bool:
        """Report the build result. Never fails the build."""
        if not self.notify_finish:
            return True
        logger.info("Bitbucket notify on finish")
        self.notify(build, console, event="finish")
        return True

    def notify(self, build: Build, console: TextIO | None = None, event: str = "finish") -> NotificationResult:
        """
        Resolve the build's Bitbucket commits and send them its status.

        Every error is logged here and returned in the result instead of raised.
        Statuses sent before a failure are not taken back.
        """
        result = NotificationResult()
        try:
            coordinates = resolve_repository_coordinates(build.project, self.host)
            revisions = resolve_build_revisions(build.build_data)
            resources = build_status_resources(coordinates, revisions)
            status = create_build_status(build)
            result.state = status.state

            if not resources:
                logger.info(f"No Bitbucket repositories to notify for {status.key}")
                console_print(console, "No Bitbucket repositories to notify")
                return result

            self._client.notify(resources, status, sent=result.sent)
        except Exception as e:
            # never propagate into the build being reported on
            logger.info(f"Bitbucket notify on {event} failed: {e}", exc_info=True)
            console_print(console, f"Bitbucket notify on {event} failed: {e}")
            result.error = e
            return result

        console_print(console, f"Sending build status {status.state.value} to Bitbucket is done!")
        logger.info(f"Bitbucket notify on {event} succeeded")
        return result
