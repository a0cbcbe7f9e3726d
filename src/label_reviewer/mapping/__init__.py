"""
Label Mapping Layer

This module parses the label -> reviewers mapping and selects a
reviewer for a pull request's labels.
"""

from .parser import LabelMapping, MappingParser, parse_label_mappings
from .selector import (
    ReviewerSelector,
    default_random_source,
    find_reviewer_by_labels,
    select_reviewer,
)

__all__ = [
    'LabelMapping',
    'MappingParser',
    'parse_label_mappings',
    'ReviewerSelector',
    'default_random_source',
    'find_reviewer_by_labels',
    'select_reviewer',
]
