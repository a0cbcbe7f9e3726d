"""
GitHub Integration Layer

This module provides GitHub API integration for pull request retrieval,
reviewer requests, and workflow event reading.
"""

from .client import GitHubClient, GitHubAPIError, RateLimitExceeded
from .event import EventReader

__all__ = ['GitHubClient', 'GitHubAPIError', 'RateLimitExceeded', 'EventReader']
