"""
Snapshots of the orchestrator's build and SCM state.

The notifier never reaches into a live orchestrator. The adapter copies what
it needs into these immutable types and hands them over.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class Result(str, Enum):
    """Terminal build result. A running build has no result (None)."""

    SUCCESS = "SUCCESS"
    UNSTABLE = "UNSTABLE"
    FAILURE = "FAILURE"
    NOT_BUILT = "NOT_BUILT"
    ABORTED = "ABORTED"


@dataclass(frozen=True)
class RemoteConfig:
    """A named git remote with its fetch URIs."""

    name: str
    uris: tuple[str, ...] = ()


@dataclass(frozen=True)
class GitSCM:
    """Git checkout configuration; the only SCM a status can be sent for."""

    remotes: tuple[RemoteConfig, ...] = ()


@dataclass(frozen=True)
class MultiSCM:
    """Several SCMs checked out by one job."""

    scms: tuple["ScmConfig", ...] = ()


@dataclass(frozen=True)
class OtherSCM:
    """Any non-git SCM (subversion, mercurial, ...)."""

    kind: str


ScmConfig = Union[GitSCM, MultiSCM, OtherSCM]


@dataclass(frozen=True)
class Project:
    """Job configuration relevant to status reporting."""

    full_display_name: str
    absolute_url: str
    scm: ScmConfig | None = None


@dataclass(frozen=True)
class BuildData:
    """Git data recorded for one SCM participant of a build."""

    remote_urls: tuple[str, ...] = ()
    last_built_revision: str | None = None
    # branch name -> SHA, in recorded order
    builds_by_branch_name: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Build:
    """One build of a project."""

    project: Project
    number: int
    result: Result | None = None
    build_data: tuple[BuildData, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Build":
        """
        Create a build snapshot from its JSON representation.

        Example:
            {
              "number": 42,
              "result": "SUCCESS",
              "project": {
                "full_display_name": "myjob",
                "absolute_url": "https://ci.example.com/job/myjob/",
                "scm": {"type": "git", "remotes": [{"name": "origin", "uris": ["..."]}]}
              },
              "build_data": [{"remote_urls": ["..."], "last_built_revision": "abc123"}]
            }
        """
        raw_result = data.get("result")
        project = data["project"]
        return cls(
            project=Project(
                full_display_name=project["full_display_name"],
                absolute_url=project["absolute_url"],
                scm=scm_from_dict(project.get("scm")),
            ),
            number=int(data["number"]),
            result=Result(raw_result) if raw_result else None,
            build_data=tuple(
                BuildData(
                    remote_urls=tuple(entry.get("remote_urls", ())),
                    last_built_revision=entry.get("last_built_revision"),
                    builds_by_branch_name=dict(entry.get("builds_by_branch_name", {})),
                )
                for entry in data.get("build_data", [])
            ),
        )


def scm_from_dict(data: dict[str, Any] | None) -> ScmConfig | None:
    """Decode a tagged SCM entry (``{"type": "git" | "multi" | <other>}``)."""
    if data is None:
        return None

    kind = data.get("type", "")
    if kind == "git":
        return GitSCM(
            remotes=tuple(
                RemoteConfig(name=remote.get("name", "origin"), uris=tuple(remote.get("uris", ())))
                for remote in data.get("remotes", [])
            )
        )
    if kind == "multi":
        children = (scm_from_dict(child) for child in data.get("scms", []))
        return MultiSCM(scms=tuple(child for child in children if child is not None))
    return OtherSCM(kind=kind)
