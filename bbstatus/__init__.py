"""
Bitbucket build status notifier.

Reports CI build state to the Bitbucket Cloud commit status API.
"""

__version__ = "0.3.0"
