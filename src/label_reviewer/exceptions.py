"""
Exceptions

Error categories surfaced to the action runner.
"""

FORMAT_HINT = 'Each pair must be in the format "label1:[reviewer1,reviewer2]".'


class LabelReviewerError(Exception):
    """Base class for label reviewer errors"""


class FormatError(LabelReviewerError, ValueError):
    """Mapping string does not follow the label:[reviewers] grammar"""
    def __init__(self, prefix: str = ""):
        message = f"{prefix} {FORMAT_HINT}" if prefix else FORMAT_HINT
        super().__init__(message)


class SelectionError(LabelReviewerError):
    """Random source produced an index outside the candidate list"""
    def __init__(self, index: int, candidate_count: int):
        super().__init__(
            f"Random index {index} is out of range for {candidate_count} candidates"
        )
        self.index = index
        self.candidate_count = candidate_count


class ConfigurationError(LabelReviewerError):
    """Required setting missing or invalid"""


class PullRequestNotFound(LabelReviewerError):
    """No pull request in the event payload"""
    def __init__(self, message: str = "No pull request found."):
        super().__init__(message)


class EventPayloadError(LabelReviewerError):
    """Event payload or pull request data could not be read"""


class DraftPullRequest(LabelReviewerError):
    """Pull request is still a draft"""
    def __init__(self, message: str = "No reviewer is assigned because the pull request is draft."):
        super().__init__(message)
