"""
Label Mapping Parser

Parses the assign-mappings setting into a label -> reviewers mapping.
Format: "label1:[reviewer1,reviewer2],label2:[reviewer3]"
"""

import re
import logging
from typing import Dict, List, Tuple

from ..exceptions import FormatError


logger = logging.getLogger(__name__)

LabelMapping = Dict[str, List[str]]


class MappingParser:
    """
    Parser for the label mapping string.

    Each pair is recognised as a run of non-comma characters, a colon and
    a bracketed reviewer list, so reviewer lists may hold commas while
    whitespace around the separating commas is tolerated.
    """

    def __init__(self):
        """Initialize mapping parser."""
        self.pair_pattern = re.compile(r'[^,]+:[^\]]+\]')

    def parse(self, input_str: str) -> LabelMapping:
        """
        Parse mapping string into a label -> reviewers dictionary.

        Args:
            input_str: Raw mapping string

        Returns:
            Mapping of label to ordered reviewer list

        Raises:
            FormatError: On the first malformed pair
        """
        mapping: LabelMapping = {}

        for pair_str in self._split_pairs(input_str):
            label, reviewers = self._convert_into_label_and_reviewers(pair_str)
            if label in mapping:
                logger.debug(f"Label '{label}' defined more than once, keeping the last definition")
            mapping[label] = reviewers

        logger.debug(f"Parsed {len(mapping)} label mappings")
        return mapping

    def _split_pairs(self, input_str: str) -> List[str]:
        """
        Split mapping string into pair substrings.

        Args:
            input_str: e.g. "label1:[reviewer1,reviewer2],label2:[reviewer3]"

        Returns:
            e.g. ["label1:[reviewer1,reviewer2]", "label2:[reviewer3]"]
        """
        matches = self.pair_pattern.findall(input_str or '')
        if not matches:
            raise FormatError()
        return matches

    def _convert_into_label_and_reviewers(self, pair_str: str) -> Tuple[str, List[str]]:
        """
        Convert a single pair into label and reviewer list.

        Args:
            pair_str: e.g. "label1:[reviewer1,reviewer2]"

        Returns:
            Tuple of (label, reviewers)
        """
        label, _, reviewers = pair_str.partition(':')
        if not label or not reviewers:
            raise FormatError()

        normalized_label = label.strip()
        if not normalized_label:
            raise FormatError("label must not be empty.")

        if len(reviewers) < 2 or not (reviewers.startswith('[') and reviewers.endswith(']')):
            raise FormatError()

        normalized_reviewers = [
            reviewer.strip()
            for reviewer in reviewers[1:-1].split(',')
            if reviewer.strip()
        ]
        if not normalized_reviewers:
            raise FormatError("reviewers must not be empty.")

        return normalized_label, normalized_reviewers


def parse_label_mappings(input_str: str) -> LabelMapping:
    """Parse mapping string with a fresh MappingParser."""
    return MappingParser().parse(input_str)
