"""
Label Reviewer

Pull Request 라벨 기반 리뷰어 자동 지정 GitHub Action
"""

__version__ = "1.0.0"

from .exceptions import FormatError, SelectionError
from .mapping import MappingParser, ReviewerSelector, find_reviewer_by_labels, parse_label_mappings

__all__ = [
    "FormatError",
    "SelectionError",
    "MappingParser",
    "ReviewerSelector",
    "find_reviewer_by_labels",
    "parse_label_mappings",
]
