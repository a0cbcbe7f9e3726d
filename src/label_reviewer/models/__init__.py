"""
Data Models

Label Reviewer 시스템의 데이터 모델들
"""

from .pull_request import (
    PullRequestContext,
    LabelPayload,
    UserPayload,
    PullRequestPayload,
    EventPayload,
)

__all__ = [
    "PullRequestContext",
    "LabelPayload",
    "UserPayload",
    "PullRequestPayload",
    "EventPayload",
]
