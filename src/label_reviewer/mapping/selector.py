"""
Reviewer Selector

Picks one reviewer among the candidates contributed by the pull
request labels.
"""

import random
import logging
from typing import Callable, Iterable, List, Optional, Sequence

from ..exceptions import SelectionError
from .parser import LabelMapping, MappingParser


logger = logging.getLogger(__name__)

RandomSource = Callable[[int], int]


def default_random_source(max_inclusive: int) -> int:
    """Uniform integer in [0, max_inclusive]."""
    return random.randint(0, max_inclusive)


class ReviewerSelector:
    """
    Selects a reviewer for a set of labels.

    Candidates are gathered in label order, reviewers mapped from several
    matched labels appear once per label, and excluded users are dropped
    before the random pick.
    """

    def __init__(self, random_source: Optional[RandomSource] = None):
        """
        Initialize reviewer selector.

        Args:
            random_source: Callable returning an index in [0, max_inclusive]
        """
        self.random_source = random_source or default_random_source

    def collect_candidates(
        self,
        labels: Sequence[str],
        mapping: LabelMapping,
        exclude: Iterable[str] = ()
    ) -> List[str]:
        """
        Gather candidates for labels, minus excluded users.

        Args:
            labels: Pull request labels in order
            mapping: Parsed label mapping
            exclude: Users that must never be selected

        Returns:
            Ordered candidate list, duplicates preserved
        """
        excluded = set(exclude)
        candidates = [
            reviewer
            for label in labels
            for reviewer in mapping.get(label, [])
        ]
        return [reviewer for reviewer in candidates if reviewer not in excluded]

    def select(
        self,
        labels: Sequence[str],
        mapping: LabelMapping,
        exclude: Iterable[str] = ()
    ) -> Optional[str]:
        """
        Select one reviewer.

        Args:
            labels: Pull request labels in order
            mapping: Parsed label mapping
            exclude: Users that must never be selected

        Returns:
            Reviewer identifier, or None when nobody is eligible

        Raises:
            SelectionError: If the random source returns an out-of-range index
        """
        if not labels:
            return None

        candidates = self.collect_candidates(labels, mapping, exclude)
        if not candidates:
            logger.debug(f"No candidates for labels {list(labels)}")
            return None

        index = self.random_source(len(candidates) - 1)
        if not 0 <= index < len(candidates):
            raise SelectionError(index, len(candidates))

        reviewer = candidates[index]
        logger.debug(f"Selected {reviewer} from {len(candidates)} candidates")
        return reviewer


def select_reviewer(
    labels: Sequence[str],
    mapping: LabelMapping,
    exclude: Iterable[str],
    random_source: RandomSource
) -> Optional[str]:
    return ReviewerSelector(random_source).select(labels, mapping, exclude)


def find_reviewer_by_labels(
    labels: Sequence[str],
    mapping_str: str,
    exclude: Iterable[str] = (),
    random_source: Optional[RandomSource] = None
) -> Optional[str]:
    """
    Parse the mapping string and select a reviewer for labels.

    The mapping string is not parsed when labels is empty.

    Args:
        labels: e.g. ["label1", "label2"]
        mapping_str: e.g. "label1:[reviewer1,reviewer2],label2:[reviewer3]"
        exclude: Users that must never be selected, e.g. the author
        random_source: Callable returning an index in [0, max_inclusive]

    Returns:
        Reviewer identifier or None
    """
    if not labels:
        return None

    mapping = MappingParser().parse(mapping_str)
    return ReviewerSelector(random_source).select(labels, mapping, exclude)
