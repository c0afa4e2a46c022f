"""
Bitbucket API client for commit build statuses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import httpx

from bbstatus.core.exceptions import BitbucketAPIError, DeliveryError
from bbstatus.core.logging import get_logger
from bbstatus.models.status import BuildStatus, StatusResource

logger = get_logger(__name__)


@dataclass(frozen=True)
class CredentialCheck:
    """Outcome of validating an OAuth consumer."""

    ok: bool
    message: str = ""


class BitbucketClient:
    """Client for the Bitbucket commit status API using an OAuth consumer."""

    API_URL = "https://api.bitbucket.org/2.0"
    TOKEN_URL = "https://bitbucket.org/site/oauth2/access_token"

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        api_url: str = API_URL,
        token_url: str = TOKEN_URL,
        timeout: float = 10.0,
    ):
        self._api_key = api_key
        self._api_secret = api_secret
        self._api_url = api_url.rstrip("/")
        self._token_url = token_url
        self._timeout = timeout

    def get_access_token(self, client: httpx.Client) -> str:
        """
        Exchange the consumer key and secret for an access token.

        Two-legged grant: no user token takes part, the consumer acts for itself.

        Returns:
            Access token, empty if Bitbucket did not issue one

        Raises:
            DeliveryError: If the token request fails
        """
        try:
            response = client.post(
                self._token_url,
                data={"grant_type": "client_credentials"},
                auth=(self._api_key, self._api_secret),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise BitbucketAPIError(
                f"Failed to get access token: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise DeliveryError(f"Failed to get access token: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise BitbucketAPIError("Token endpoint returned invalid JSON") from e

        return data.get("access_token", "") if isinstance(data, dict) else ""

    def post_build_status(
        self,
        client: httpx.Client,
        token: str,
        resource: StatusResource,
        status: BuildStatus,
    ) -> httpx.Response:
        """
        Send one build status for one commit.

        Raises:
            DeliveryError: If the request fails or Bitbucket answers non-2xx
        """
        url = resource.generate_url(self._api_url)
        headers = {
            "Content-type": "application/json",
            "Authorization": f"Bearer {token}",
        }

        try:
            response = client.post(url, headers=headers, content=status.to_json())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Bitbucket API error {e.response.status_code}: {e.response.text}")
            raise BitbucketAPIError(
                f"Failed to send build status to {resource.coordinate.full_name}: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise DeliveryError(f"Failed to send build status to {resource.coordinate.full_name}: {e}") from e

        logger.info(f"This response was received: {response.status_code}")
        return response

    def notify(
        self,
        resources: Iterable[StatusResource],
        status: BuildStatus,
        sent: list[StatusResource] | None = None,
    ) -> list[StatusResource]:
        """
        Send the status to every resource, in order.

        Stops at the first failure; statuses already sent stay sent and are
        left in `sent` when the caller passes its own list.

        Returns:
            Resources the status was delivered to

        Raises:
            DeliveryError: If the token grant or any send fails
        """
        resources = list(resources)
        sent = sent if sent is not None else []
        if not resources:
            return sent

        with httpx.Client(timeout=self._timeout) as client:
            token = self.get_access_token(client)
            if not token:
                raise DeliveryError("Bitbucket issued an empty access token")
            for resource in resources:
                self.post_build_status(client, token, resource, status)
                sent.append(resource)

        return sent

    def check_credentials(self) -> CredentialCheck:
        """Try the token grant without sending any status."""
        if not self._api_key or not self._api_secret:
            return CredentialCheck(ok=False, message="Please enter Bitbucket OAuth credentials")

        try:
            with httpx.Client(timeout=self._timeout) as client:
                token = self.get_access_token(client)
        except DeliveryError as e:
            return CredentialCheck(ok=False, message=f"{type(e).__name__}: {e}")

        if not token:
            return CredentialCheck(ok=False, message="Invalid Bitbucket OAuth credentials")
        return CredentialCheck(ok=True)
