"""
Configuration Management

시스템 설정 관리

설정값은 두 가지 입력 소스 중 하나에서 읽는다.
- 개발 모드: ASSIGN_MAPPINGS 환경 변수가 설정된 경우 일반 환경 변수
- 액션 모드: GitHub Actions 가 전달하는 INPUT_* 환경 변수
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Mapping
from pathlib import Path
import logging

from .exceptions import ConfigurationError


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class InputProvider:
    """설정 입력 소스"""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    def get(self, name: str, required: bool = False) -> Optional[str]:
        """입력값 조회. required 인데 비어 있으면 ConfigurationError"""
        value = None
        for key in self._candidate_keys(name):
            if self.environ.get(key) is not None:
                value = self.environ[key].strip()
                break

        if required and not value:
            raise ConfigurationError(f"Input required and not supplied: {name}")
        return value or None

    def _candidate_keys(self, name: str):
        """기본: 입력 이름을 그대로 환경 변수 키로 사용"""
        return [name]


class EnvironmentInputProvider(InputProvider):
    """일반 환경 변수 기반 입력 (개발 모드)"""

    keys = {
        "assign-mappings": "ASSIGN_MAPPINGS",
        "githubToken": "GITHUB_TOKEN",
        "pull-request-number": "PULL_REQUEST_NUMBER",
    }

    def _candidate_keys(self, name: str):
        return [self.keys.get(name, name.replace("-", "_").upper())]


class ActionInputProvider(InputProvider):
    """GitHub Actions 입력 기반 (INPUT_<NAME>)"""

    def _candidate_keys(self, name: str):
        upper = name.replace(" ", "_").upper()
        # 러너는 하이픈을 유지하지만 직접 실행 시 언더스코어를 쓰는 경우도 허용
        return [
            f"INPUT_{upper}",
            f"INPUT_{upper.replace('-', '_')}",
        ]


def get_input_provider(environ: Optional[Mapping[str, str]] = None) -> InputProvider:
    """ASSIGN_MAPPINGS 존재 여부로 입력 소스 선택"""
    environ = os.environ if environ is None else environ
    if environ.get("ASSIGN_MAPPINGS") is not None:
        return EnvironmentInputProvider(environ)
    return ActionInputProvider(environ)


def _parse_pr_number(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"pull-request-number must be an integer: {value!r}")


@dataclass
class GitHubConfig:
    """GitHub API 설정"""
    token: Optional[str] = None
    api_base_url: str = "https://api.github.com"
    timeout_seconds: int = 30


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class AppConfig:
    """전체 애플리케이션 설정"""
    assign_mappings: Optional[str] = None
    pull_request_number: Optional[int] = None
    github: GitHubConfig = field(default_factory=GitHubConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """환경 변수에서 설정 로드"""
        environ = os.environ if environ is None else environ
        provider = get_input_provider(environ)

        try:
            timeout = int(environ.get("GITHUB_TIMEOUT", "30"))
        except ValueError:
            raise ConfigurationError(f"GITHUB_TIMEOUT must be an integer: {environ.get('GITHUB_TIMEOUT')!r}")

        return cls(
            assign_mappings=provider.get("assign-mappings", required=True),
            pull_request_number=_parse_pr_number(provider.get("pull-request-number")),
            github=GitHubConfig(
                token=provider.get("githubToken", required=True),
                api_base_url=environ.get("GITHUB_API_URL", "https://api.github.com"),
                timeout_seconds=timeout,
            ),
            logging=LoggingConfig(
                level=environ.get("LOG_LEVEL", "INFO"),
                format=environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
                file_path=environ.get("LOG_FILE"),
            ),
            debug=environ.get("RUNNER_DEBUG") == "1",
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """YAML 파일에서 설정 로드"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        pr_number = config_data.get('pull_request_number')
        return cls(
            assign_mappings=config_data.get('assign_mappings'),
            pull_request_number=_parse_pr_number(None if pr_number is None else str(pr_number)),
            github=GitHubConfig(**config_data.get('github', {})),
            logging=LoggingConfig(**config_data.get('logging', {})),
            debug=config_data.get('debug', False),
        )

    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []

        if not self.assign_mappings:
            errors.append("assign-mappings is required")

        if not self.github.token:
            errors.append("GitHub token is required")

        if self.pull_request_number is not None and self.pull_request_number <= 0:
            errors.append("pull-request-number must be positive")

        if self.github.timeout_seconds <= 0:
            errors.append("GitHub timeout must be positive")

        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ConfigurationError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'assign_mappings': self.assign_mappings,
            'pull_request_number': self.pull_request_number,
            'github': {
                'api_base_url': self.github.api_base_url,
                'timeout_seconds': self.github.timeout_seconds,
                # 보안상 토큰은 제외
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
            'debug': self.debug,
        }


def setup_logging(config: LoggingConfig, debug: bool = False) -> None:
    """로깅 설정"""
    level = logging.DEBUG if debug else getattr(logging, config.level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=config.format)

    # 파일 로깅이 설정된 경우 로테이션 설정
    if config.file_path:
        from logging.handlers import RotatingFileHandler

        handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        handler.setFormatter(logging.Formatter(config.format))
        logging.getLogger().addHandler(handler)
