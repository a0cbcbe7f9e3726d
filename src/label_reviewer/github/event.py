"""
GitHub Event Reader

Reads the workflow event payload provided by the Actions runner and
resolves the pull request whose reviewer should be assigned.
"""

import os
import json
import logging
from typing import Mapping, Optional, Tuple

from ..exceptions import ConfigurationError, DraftPullRequest, EventPayloadError, PullRequestNotFound
from ..models.pull_request import EventPayload, PullRequestContext, PullRequestPayload
from .client import GitHubClient


logger = logging.getLogger(__name__)


class EventReader:
    """
    Reader for GITHUB_EVENT_PATH / GITHUB_REPOSITORY.

    pull_request events carry the pull request directly. Events such as
    workflow_run carry a pull_requests list, picked by number; its entries
    hold no labels or author, so those are fetched through the API.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    def load_payload(self) -> EventPayload:
        """Load and validate the event payload."""
        event_path = self.environ.get('GITHUB_EVENT_PATH')
        if not event_path:
            logger.warning("GITHUB_EVENT_PATH is not set, using an empty payload")
            return EventPayload()

        if not os.path.exists(event_path):
            logger.warning(f"Event file {event_path} does not exist, using an empty payload")
            return EventPayload()

        try:
            with open(event_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except ValueError as e:
            raise EventPayloadError(f"Invalid event payload in {event_path}: {e}")

        return self._build(EventPayload, data)

    def _build(self, model, data):
        """Validate data against a payload model."""
        try:
            return model(**data)
        except (TypeError, ValueError) as e:
            # pydantic ValidationError is a ValueError
            raise EventPayloadError(f"Unexpected {model.__name__} data: {e}")

    def get_repository(self) -> Tuple[str, str]:
        """Return (owner, repo) from GITHUB_REPOSITORY."""
        slug = self.environ.get('GITHUB_REPOSITORY', '')
        owner, _, repo = slug.partition('/')
        if not owner or not repo:
            raise ConfigurationError(f"GITHUB_REPOSITORY must be in format 'owner/repo': {slug!r}")
        return owner, repo

    def get_pull_request_context(
        self,
        pr_number: Optional[int] = None,
        client: Optional[GitHubClient] = None
    ) -> PullRequestContext:
        """
        Resolve the pull request to assign a reviewer to.

        Args:
            pr_number: Explicit pull request number, searched in pull_requests
            client: Used to fetch labels and author when the payload lacks them

        Returns:
            PullRequestContext

        Raises:
            PullRequestNotFound: No matching pull request in the payload
            DraftPullRequest: The pull request is a draft
            EventPayloadError: Payload or fetched pull request is malformed
        """
        payload = self.load_payload()
        pull_request = payload.find_pull_request(pr_number)
        if pull_request is None:
            raise PullRequestNotFound()

        owner, repo = self.get_repository()

        if not pull_request.is_complete:
            if client is None:
                logger.warning(f"Pull request #{pull_request.number} has no labels or author in the payload")
            else:
                pull_request = self._build(
                    PullRequestPayload,
                    client.get_pull_request(owner, repo, pull_request.number)
                )

        if pull_request.draft:
            raise DraftPullRequest()

        context = PullRequestContext(
            owner=owner,
            repo=repo,
            pr_number=pull_request.number,
            author=pull_request.user.login if pull_request.user else '',
            labels=pull_request.label_names,
            draft=pull_request.draft,
        )
        logger.info(f"Resolved {context.repository}#{context.pr_number} by {context.author} with labels {context.labels}")
        return context
