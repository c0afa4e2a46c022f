"""
Build status composition: which commits to report and what to report.
"""

from __future__ import annotations

from typing import Iterable

from bbstatus.core.exceptions import ResolutionError
from bbstatus.models.build import Build, Result
from bbstatus.models.status import BuildState, BuildStatus, RepositoryCoordinate, StatusResource


def build_status_resources(
    coordinates: Iterable[RepositoryCoordinate],
    revisions: dict[str, str],
) -> list[StatusResource]:
    """
    Pair each repository with the commit built from it.

    Raises:
        ResolutionError: If a repository's URL has no recorded revision
    """
    resources = []
    for coordinate in coordinates:
        commit_sha = revisions.get(coordinate.url)
        if not commit_sha:
            raise ResolutionError(f"commit id not found for {coordinate.url}")
        resources.append(StatusResource(coordinate=coordinate, commit_sha=commit_sha))
    return resources


def guess_build_state(result: Result | None) -> BuildState:
    """
    Map a build result to a Bitbucket state.

    A running build has no result yet and is in progress. Results other than
    SUCCESS and FAILURE (unstable, aborted, not built) are reported as failed.
    """
    if result is None:
        return BuildState.INPROGRESS
    if result == Result.SUCCESS:
        return BuildState.SUCCESSFUL
    return BuildState.FAILED


def create_build_status(build: Build, state: BuildState | None = None) -> BuildStatus:
    """Describe a build as a status entry; the key is unique per job and build number."""
    name = build.project.full_display_name
    number = build.number
    return BuildStatus(
        state=state if state is not None else guess_build_state(build.result),
        key=f"{name}#{number}",
        url=f"{build.project.absolute_url}{number}/",
        name=f"{name} #{number}",
    )
