"""
Label Reviewer Action

Main entry point that orchestrates the assignment process
from the workflow event to the reviewer request.
"""

import os
import sys
import logging
from typing import Callable, Mapping, Optional
from dataclasses import dataclass

from .config import DEFAULT_LOG_FORMAT, AppConfig, LoggingConfig, setup_logging
from .exceptions import (
    ConfigurationError,
    DraftPullRequest,
    EventPayloadError,
    FormatError,
    PullRequestNotFound,
    SelectionError,
)
from .github.client import GitHubAPIError, GitHubClient
from .github.event import EventReader
from .mapping.selector import RandomSource, default_random_source, find_reviewer_by_labels


logger = logging.getLogger(__name__)


@dataclass
class AssignmentResult:
    """Result of a single action run."""
    status: str  # 'assigned', 'skipped', 'failed'
    reviewer: Optional[str] = None
    message: str = ""

    def __post_init__(self):
        valid_statuses = {'assigned', 'skipped', 'failed'}
        if self.status not in valid_statuses:
            raise ValueError(f"Invalid status: {self.status}")

    @property
    def exit_code(self) -> int:
        return 1 if self.status == 'failed' else 0


def set_failed(message: str) -> None:
    """Report a failure as a workflow error annotation."""
    logger.error(message)
    sys.stdout.write(f"::error::{message}\n")
    sys.stdout.flush()


def set_output(name: str, value: str, environ: Optional[Mapping[str, str]] = None) -> None:
    """Append a step output when running under the Actions runner."""
    environ = os.environ if environ is None else environ
    output_path = environ.get('GITHUB_OUTPUT')
    if not output_path:
        return
    with open(output_path, 'a', encoding='utf-8') as f:
        f.write(f"{name}={value}\n")


def _default_client_factory(config: AppConfig) -> GitHubClient:
    return GitHubClient(
        config.github.token,
        base_url=config.github.api_base_url,
        timeout=config.github.timeout_seconds,
    )


class ReviewerAssigner:
    """
    Assigns one reviewer to a pull request based on its labels.

    Steps:
    1. Load settings from environment or action inputs
    2. Resolve the pull request from the event payload
    3. Select a reviewer, excluding the author
    4. Request the review
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        random_source: Optional[RandomSource] = None,
        client_factory: Optional[Callable[[AppConfig], GitHubClient]] = None
    ):
        """
        Initialize reviewer assigner.

        Args:
            environ: Environment mapping (default: os.environ)
            random_source: Index source for the selection
            client_factory: Builds the GitHub client from settings
        """
        self.environ = os.environ if environ is None else environ
        self.random_source = random_source or default_random_source
        self.client_factory = client_factory or _default_client_factory
        self.event_reader = EventReader(self.environ)

    def load_config(self) -> AppConfig:
        config = AppConfig.from_env(self.environ)
        config.validate()
        return config

    def run(self) -> AssignmentResult:
        """Run one assignment. Never raises for expected failures."""
        try:
            config = self.load_config()
        except ConfigurationError as e:
            return self._fail(f"setting is invalid: {e}")

        client = self.client_factory(config)

        try:
            context = self.event_reader.get_pull_request_context(
                config.pull_request_number, client
            )
        except (PullRequestNotFound, DraftPullRequest) as e:
            logger.info(str(e))
            return AssignmentResult(status='skipped', message=str(e))
        except ConfigurationError as e:
            return self._fail(f"setting is invalid: {e}")
        except (GitHubAPIError, EventPayloadError) as e:
            return self._fail(f"fetching pull request is failed: {e}")

        try:
            reviewer = find_reviewer_by_labels(
                context.labels,
                config.assign_mappings,
                [context.author],
                self.random_source,
            )
        except (FormatError, SelectionError) as e:
            return self._fail(f"finding reviewers is failed: {e}")

        if not reviewer:
            logger.info("No reviewer found.")
            return AssignmentResult(status='skipped', message="No reviewer found.")

        try:
            client.request_reviewers(
                context.owner, context.repo, context.pr_number, [reviewer]
            )
        except GitHubAPIError as e:
            return self._fail(f"requesting reviewers is failed: {e}")

        logger.info(f"Requested review from {reviewer} on {context.repository}#{context.pr_number}")
        set_output('reviewer', reviewer, self.environ)
        return AssignmentResult(status='assigned', reviewer=reviewer)

    def _fail(self, message: str) -> AssignmentResult:
        set_failed(message)
        return AssignmentResult(status='failed', message=message)


def main(environ: Optional[Mapping[str, str]] = None) -> int:
    """Console entry point."""
    environ = os.environ if environ is None else environ
    setup_logging(
        LoggingConfig(
            level=environ.get('LOG_LEVEL', 'INFO'),
            format=environ.get('LOG_FORMAT', DEFAULT_LOG_FORMAT),
            file_path=environ.get('LOG_FILE'),
        ),
        debug=environ.get('RUNNER_DEBUG') == '1',
    )
    return ReviewerAssigner(environ).run().exit_code
