"""
목적:
- 환경 변수 매핑에서 세션 설정 객체를 생성한다.

설명:
- 라이브러리는 `.env` 파일을 직접 읽지 않는다. 호출자가 넘긴 매핑만 해석한다.
- 누락/형식 오류는 ConfigurationError로 통일한다.

디자인 패턴:
- 팩토리 함수(Factory Function).

참조:
- scripts/run-search.py
- src_py/visual_matcher/config/models.py
"""

from __future__ import annotations

from typing import Mapping

from pydantic import ValidationError as PydanticValidationError

from visual_matcher.config.models import (
    MatchingServiceConfig,
    PreviewConfig,
    SessionConfig,
)
from visual_matcher.exceptions import ConfigurationError

REQUIRED_ENV_KEYS = ["MATCHER_BACKEND_URL"]

_DISABLED_VALUES = {"", "none", "off", "0"}


def session_config_from_env(environ: Mapping[str, str]) -> SessionConfig:
    """환경 변수 매핑으로 SessionConfig를 생성한다."""
    missing = [key for key in REQUIRED_ENV_KEYS if not environ.get(key)]
    if missing:
        raise ConfigurationError(f"필수 환경 변수가 누락되었습니다: {', '.join(missing)}")

    service_fields: dict[str, object] = {"base_url": environ["MATCHER_BACKEND_URL"]}
    if environ.get("MATCHER_FILE_SEARCH_PATH"):
        service_fields["file_search_path"] = environ["MATCHER_FILE_SEARCH_PATH"]
    if environ.get("MATCHER_URL_SEARCH_PATH"):
        service_fields["url_search_path"] = environ["MATCHER_URL_SEARCH_PATH"]
    if environ.get("MATCHER_TIMEOUT_MS"):
        service_fields["timeout_ms"] = _parse_int(environ, "MATCHER_TIMEOUT_MS")
    if environ.get("MATCHER_AUTH_TOKEN"):
        service_fields["auth_token"] = environ["MATCHER_AUTH_TOKEN"]

    preview_fields: dict[str, object] = {}
    if environ.get("MATCHER_PREVIEW_MAX_EDGE_PX"):
        preview_fields["max_edge_px"] = _parse_int(environ, "MATCHER_PREVIEW_MAX_EDGE_PX")

    session_fields: dict[str, object] = {}
    if "MATCHER_REQUEST_DEADLINE_MS" in environ:
        raw_deadline = environ["MATCHER_REQUEST_DEADLINE_MS"].strip().lower()
        session_fields["request_deadline_ms"] = (
            None if raw_deadline in _DISABLED_VALUES else _parse_int(environ, "MATCHER_REQUEST_DEADLINE_MS")
        )

    try:
        return SessionConfig(
            service=MatchingServiceConfig(**service_fields),
            preview=PreviewConfig(**preview_fields),
            **session_fields,
        )
    except PydanticValidationError as exc:
        raise ConfigurationError(f"설정값이 유효하지 않습니다: {exc}") from exc


def _parse_int(environ: Mapping[str, str], key: str) -> int:
    raw = environ[key].strip()
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"정수 환경 변수 형식이 잘못되었습니다: {key}={raw}") from exc
