"""
Data schemas for Bitbucket commit build statuses.
"""

from dataclasses import dataclass, asdict
from enum import Enum
import json


class BuildState(str, Enum):
    """Build states understood by the Bitbucket status API."""

    INPROGRESS = "INPROGRESS"
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"


@dataclass(frozen=True)
class RepositoryCoordinate:
    """Bitbucket repository a git remote points at."""

    host: str
    owner: str
    slug: str
    # Remote URI as configured; matched against recorded build data
    url: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.slug}"


@dataclass(frozen=True)
class StatusResource:
    """Build status entry of one commit in one repository."""

    coordinate: RepositoryCoordinate
    commit_sha: str

    def generate_url(self, api_url: str) -> str:
        """Build the status POST target under the given API root."""
        return (
            f"{api_url}/repositories/{self.coordinate.owner}/{self.coordinate.slug}"
            f"/commit/{self.commit_sha}/statuses/build"
        )


@dataclass(frozen=True)
class BuildStatus:
    """Status payload for one build event."""

    state: BuildState
    key: str
    url: str
    name: str

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data["state"] = self.state.value
        return data

    def to_json(self, indent: int = 4) -> str:
        """Serialize to the request body sent to Bitbucket."""
        return json.dumps(self.to_dict(), indent=indent)
