"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import pytest
from unittest.mock import MagicMock, patch

# Add repository root (holding the bbstatus package) to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def mock_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("BITBUCKET_API_KEY", "test_key")
    monkeypatch.setenv("BITBUCKET_API_SECRET", "test_secret")
    monkeypatch.setenv("BITBUCKET_NOTIFY_START", "true")
    monkeypatch.setenv("BITBUCKET_NOTIFY_FINISH", "true")


# ============================================================================
# Build Fixtures
# ============================================================================

REPO_URL = "https://bitbucket.org/myteam/myrepo.git"
SHA = "0123456789abcdef0123456789abcdef01234567"


def make_git_scm(*uris: str):
    from bbstatus.models.build import GitSCM, RemoteConfig
    return GitSCM(remotes=(RemoteConfig(name="origin", uris=tuple(uris)),))


def make_build(scm=None, result=None, build_data=None, number=42, name="myjob"):
    from bbstatus.models.build import Build, BuildData, Project
    if build_data is None:
        build_data = (BuildData(remote_urls=(REPO_URL,), last_built_revision=SHA),)
    return Build(
        project=Project(
            full_display_name=name,
            absolute_url=f"https://ci.example.com/job/{name}/",
            scm=scm if scm is not None else make_git_scm(REPO_URL),
        ),
        number=number,
        result=result,
        build_data=tuple(build_data),
    )


@pytest.fixture
def git_build():
    """A successful build of one Bitbucket repository."""
    from bbstatus.models.build import Result
    return make_build(result=Result.SUCCESS)


@pytest.fixture
def bitbucket_client():
    """Create a BitbucketClient with test credentials."""
    from bbstatus.services.bitbucket.client import BitbucketClient
    return BitbucketClient("test_key", "test_secret")


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx Client."""
    with patch("httpx.Client") as mock:
        client_instance = MagicMock()
        mock.return_value.__enter__.return_value = client_instance
        yield client_instance


def make_response(status_code=200, json_data=None):
    """Mock an httpx.Response with the given status."""
    import httpx

    response = MagicMock()
    response.status_code = status_code
    response.text = ""
    response.json.return_value = json_data if json_data is not None else {}
    if status_code >= 400:
        request = httpx.Request("POST", "https://api.bitbucket.org/2.0")
        real = httpx.Response(status_code, request=request)
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            f"{status_code} error", request=request, response=real
        )
    else:
        response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def build_factory():
    """Factory for build snapshots; defaults to one Bitbucket repository."""
    return make_build


@pytest.fixture
def scm_factory():
    """Factory for single-remote git SCMs."""
    return make_git_scm


@pytest.fixture
def response_factory():
    """Factory for mocked httpx responses."""
    return make_response
