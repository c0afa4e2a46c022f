"""
Mapping of a build's git configuration to Bitbucket repositories and commits.
"""

from __future__ import annotations

import re
from urllib.parse import urlparse

from bbstatus.core.exceptions import ConfigurationError
from bbstatus.core.logging import get_logger
from bbstatus.models.build import BuildData, GitSCM, MultiSCM, Project, ScmConfig
from bbstatus.models.status import RepositoryCoordinate

logger = get_logger(__name__)

BITBUCKET_HOST = "bitbucket.org"

# git@bitbucket.org:owner/slug.git
_SCP_LIKE_RE = re.compile(r"^(?:[^@/]+@)?(?P<host>[^:/]+):(?P<path>.*)$")


def resolve_project_scms(project: Project) -> list[ScmConfig]:
    """
    List the SCMs a project checks out.

    Matrix and multi-SCM jobs carry a MultiSCM container instead of a single
    SCM; its children are the effective set.

    Raises:
        ConfigurationError: If the project has no SCM at all
    """
    scm = project.scm
    if isinstance(scm, MultiSCM):
        scms = list(scm.scms)
    elif scm is None:
        scms = []
    else:
        scms = [scm]

    if not scms:
        raise ConfigurationError("no SCM configured")
    return scms


def parse_repository_uri(uri: str) -> tuple[str, str]:
    """Split a git remote URI into (host, path)."""
    if "://" in uri:
        parsed = urlparse(uri)
        # hostname would lowercase; keep the host as written
        host = parsed.netloc.rpartition("@")[2].split(":")[0]
        return host, parsed.path

    match = _SCP_LIKE_RE.match(uri)
    if match:
        return match.group("host"), match.group("path")
    return "", uri


def parse_repository_path(path: str) -> tuple[str, str]:
    """
    Extract (owner, slug) from a repository path such as ``/owner/slug.git``.

    Raises:
        ConfigurationError: If either part is empty
    """
    separator = path.rfind("/")
    tail = path[separator + 1:]
    slug = tail[:-len(".git")] if tail.endswith(".git") else tail
    if not slug:
        raise ConfigurationError("missing slug")

    owner = path[:separator] if separator != -1 else ""
    if "/" in owner:
        owner = owner[owner.find("/") + 1:]
    if not owner:
        raise ConfigurationError("missing owner")

    return owner, slug


def resolve_repository_coordinate(scm: GitSCM, host: str = BITBUCKET_HOST) -> RepositoryCoordinate:
    """
    Resolve the Bitbucket repository of a single git SCM.

    Raises:
        ConfigurationError: On ambiguous remotes, foreign host or unparsable path
    """
    if len(scm.remotes) != 1 or len(scm.remotes[0].uris) != 1:
        raise ConfigurationError("none or multiple repos")

    uri = scm.remotes[0].uris[0]
    uri_host, path = parse_repository_uri(uri)
    if uri_host != host:
        raise ConfigurationError("unsupported host")

    owner, slug = parse_repository_path(path)
    return RepositoryCoordinate(host=uri_host, owner=owner, slug=slug, url=uri)


def resolve_repository_coordinates(project: Project, host: str = BITBUCKET_HOST) -> list[RepositoryCoordinate]:
    """
    Resolve every Bitbucket repository a project builds from.

    Non-git SCMs are skipped; the result may be empty.

    Raises:
        ConfigurationError: If the project has no SCM or a git SCM cannot be mapped
    """
    coordinates = []
    for scm in resolve_project_scms(project):
        if not isinstance(scm, GitSCM):
            logger.debug(f"Skipping non-git SCM {scm!r}")
            continue
        coordinates.append(resolve_repository_coordinate(scm, host))
    return coordinates


def resolve_build_revisions(build_data: list[BuildData] | tuple[BuildData, ...]) -> dict[str, str]:
    """
    Map each recorded remote URL to the commit that was built.

    The last built revision wins; without one the first branch entry is used.
    Entries without a remote URL or without any revision are left out.
    """
    revisions: dict[str, str] = {}
    for data in build_data:
        if not data.remote_urls:
            continue
        url = data.remote_urls[0]

        if data.last_built_revision:
            revisions[url] = data.last_built_revision
            continue

        for sha in data.builds_by_branch_name.values():
            revisions[url] = sha
            break

    return revisions
