"""
Unit tests for configuration loading.
"""

import logging
import pytest

from label_reviewer.config import (
    ActionInputProvider,
    AppConfig,
    EnvironmentInputProvider,
    GitHubConfig,
    InputProvider,
    LoggingConfig,
    get_input_provider,
    setup_logging,
)
from label_reviewer.exceptions import ConfigurationError


DEV_ENV = {
    "ASSIGN_MAPPINGS": "bug:[alice,bob]",
    "GITHUB_TOKEN": "ghp_dev_token",
}

ACTION_ENV = {
    "INPUT_ASSIGN-MAPPINGS": "bug:[alice,bob]",
    "INPUT_GITHUBTOKEN": "ghp_action_token",
}


class TestInputProviders:
    """Unit tests for input provider selection."""

    def test_dev_mode_selected_by_assign_mappings(self):
        assert isinstance(get_input_provider(DEV_ENV), EnvironmentInputProvider)

    def test_action_mode_selected_by_default(self):
        assert isinstance(get_input_provider(ACTION_ENV), ActionInputProvider)

    def test_action_input_accepts_underscore_variant(self):
        provider = ActionInputProvider({"INPUT_PULL_REQUEST_NUMBER": "7"})
        assert provider.get("pull-request-number") == "7"

    def test_required_input_missing(self):
        provider = ActionInputProvider({})
        with pytest.raises(ConfigurationError, match="assign-mappings"):
            provider.get("assign-mappings", required=True)

    def test_blank_input_treated_as_missing(self):
        provider = ActionInputProvider({"INPUT_PULL-REQUEST-NUMBER": ""})
        assert provider.get("pull-request-number") is None

    def test_base_provider_reads_name_as_key(self):
        provider = InputProvider({"ASSIGN_MAPPINGS": " bug:[alice] "})

        assert provider.get("ASSIGN_MAPPINGS") == "bug:[alice]"
        assert provider.get("GITHUB_TOKEN") is None


class TestAppConfig:
    """Unit tests for AppConfig."""

    def test_from_env_dev_mode(self):
        config = AppConfig.from_env({**DEV_ENV, "PULL_REQUEST_NUMBER": "42"})

        assert config.assign_mappings == "bug:[alice,bob]"
        assert config.github.token == "ghp_dev_token"
        assert config.pull_request_number == 42
        config.validate()

    def test_from_env_action_mode(self):
        config = AppConfig.from_env(ACTION_ENV)

        assert config.assign_mappings == "bug:[alice,bob]"
        assert config.github.token == "ghp_action_token"
        assert config.pull_request_number is None
        assert config.github.api_base_url == "https://api.github.com"

    def test_from_env_reads_api_url(self):
        config = AppConfig.from_env({**ACTION_ENV, "GITHUB_API_URL": "https://ghe.example.com/api/v3"})
        assert config.github.api_base_url == "https://ghe.example.com/api/v3"

    def test_from_env_missing_token(self):
        with pytest.raises(ConfigurationError, match="githubToken"):
            AppConfig.from_env({"ASSIGN_MAPPINGS": "bug:[alice]"})

    def test_from_env_invalid_pr_number(self):
        with pytest.raises(ConfigurationError, match="integer"):
            AppConfig.from_env({**DEV_ENV, "PULL_REQUEST_NUMBER": "abc"})

    def test_validate_rejects_non_positive_pr_number(self):
        config = AppConfig(
            assign_mappings="bug:[alice]",
            pull_request_number=0,
            github=GitHubConfig(token="ghp_token"),
        )
        with pytest.raises(ConfigurationError, match="positive"):
            config.validate()

    def test_validate_rejects_invalid_log_level(self):
        config = AppConfig(
            assign_mappings="bug:[alice]",
            github=GitHubConfig(token="ghp_token"),
            logging=LoggingConfig(level="LOUD"),
        )
        with pytest.raises(ConfigurationError, match="Invalid log level"):
            config.validate()

    def test_from_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "assign_mappings: 'bug:[alice]'\n"
            "pull_request_number: 5\n"
            "github:\n"
            "  token: ghp_yaml_token\n"
            "  timeout_seconds: 10\n"
            "logging:\n"
            "  level: DEBUG\n",
            encoding="utf-8",
        )

        config = AppConfig.from_yaml(str(config_file))

        assert config.assign_mappings == "bug:[alice]"
        assert config.pull_request_number == 5
        assert config.github.timeout_seconds == 10
        assert config.logging.level == "DEBUG"
        config.validate()

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.from_yaml(str(tmp_path / "missing.yaml"))

    def test_to_dict_excludes_token(self):
        config = AppConfig.from_env(DEV_ENV)
        data = config.to_dict()

        assert "token" not in data["github"]
        assert data["assign_mappings"] == "bug:[alice,bob]"


class TestSetupLogging:

    def test_file_handler_added(self, tmp_path):
        log_file = tmp_path / "action.log"
        root_logger = logging.getLogger()
        before = list(root_logger.handlers)

        try:
            setup_logging(LoggingConfig(file_path=str(log_file)))
            added = [h for h in root_logger.handlers if h not in before]
            assert any(getattr(h, "baseFilename", None) == str(log_file) for h in added)
        finally:
            for handler in root_logger.handlers[:]:
                if handler not in before:
                    root_logger.removeHandler(handler)
                    handler.close()
