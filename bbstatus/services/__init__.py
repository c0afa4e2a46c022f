# Services module - SCM resolution and Bitbucket integration
from .bitbucket import BitbucketClient, CredentialCheck
from .scm import resolve_build_revisions, resolve_repository_coordinates
from .status import build_status_resources, create_build_status, guess_build_state

__all__ = [
    "BitbucketClient",
    "CredentialCheck",
    "build_status_resources",
    "create_build_status",
    "guess_build_state",
    "resolve_build_revisions",
    "resolve_repository_coordinates",
]
