"""
Pull Request Data Models

Pull Request 컨텍스트 및 GitHub 이벤트 페이로드 모델들
"""

from dataclasses import dataclass, field
from typing import List, Optional
from pydantic import BaseModel, validator


@dataclass
class PullRequestContext:
    """리뷰어 선택에 필요한 Pull Request 정보"""
    owner: str
    repo: str
    pr_number: int
    author: str
    labels: List[str] = field(default_factory=list)
    draft: bool = False

    def __post_init__(self):
        """데이터 검증"""
        if self.pr_number <= 0:
            raise ValueError("PR number must be positive")
        if not self.owner or not self.repo:
            raise ValueError("Owner and repo must not be empty")

    @property
    def repository(self) -> str:
        """'owner/repo' 형식의 저장소 이름"""
        return f"{self.owner}/{self.repo}"


# Pydantic models for event payload validation
class LabelPayload(BaseModel):
    """이벤트 페이로드의 라벨"""
    name: str


class UserPayload(BaseModel):
    """이벤트 페이로드의 사용자"""
    login: str


class PullRequestPayload(BaseModel):
    """이벤트 페이로드의 Pull Request

    workflow_run 등의 이벤트에서는 labels, user 가 생략될 수 있다.
    """
    number: int
    draft: bool = False
    labels: Optional[List[LabelPayload]] = None
    user: Optional[UserPayload] = None

    @validator('number')
    def validate_number(cls, v):
        if v <= 0:
            raise ValueError('PR number must be positive')
        return v

    @property
    def is_complete(self) -> bool:
        """라벨과 작성자 정보가 모두 포함되어 있는지 확인"""
        return self.labels is not None and self.user is not None

    @property
    def label_names(self) -> List[str]:
        return [label.name for label in self.labels or []]


class EventPayload(BaseModel):
    """GitHub 이벤트 페이로드 (필요한 필드만)"""
    pull_request: Optional[PullRequestPayload] = None
    pull_requests: List[PullRequestPayload] = []

    def find_pull_request(self, pr_number: Optional[int] = None) -> Optional[PullRequestPayload]:
        """번호가 주어지면 pull_requests 에서, 아니면 pull_request 반환"""
        if pr_number is None:
            return self.pull_request
        return next((pr for pr in self.pull_requests if pr.number == pr_number), None)
