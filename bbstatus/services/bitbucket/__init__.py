# Bitbucket services - commit status API integration
from .client import BitbucketClient, CredentialCheck

__all__ = ["BitbucketClient", "CredentialCheck"]
