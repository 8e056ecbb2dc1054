"""
목적:
- Visual Matcher 라이브러리의 설정 인터페이스를 정의한다.

설명:
- 매칭 서비스 연결/미리보기/화면 표시/요청 기한 값을 단일 모델로 관리한다.
- 환경 파일은 라이브러리가 아닌 드라이버 스크립트가 읽는다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- scripts/run-search.py
- src_py/visual_matcher/matching/client.py
- src_py/visual_matcher/session/controller.py
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class MatchingServiceConfig(BaseModel):
    """매칭 서비스 HTTP 연결 설정 모델."""

    base_url: str = Field(min_length=1)
    file_search_path: str = Field(default="/api/search-by-file", min_length=1)
    url_search_path: str = Field(default="/api/search-by-url", min_length=1)
    timeout_ms: int = Field(default=10_000, ge=1)
    auth_token: str | None = Field(default=None)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        normalized = value.strip().rstrip("/")
        if not normalized.startswith(("http://", "https://")):
            raise ValueError("base_url은 http:// 또는 https://로 시작해야 합니다")
        return normalized

    @field_validator("file_search_path", "url_search_path")
    @classmethod
    def validate_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("검색 경로는 '/'로 시작해야 합니다")
        return value

    def endpoint(self, path: str) -> str:
        """base_url과 경로를 결합한 전체 URL을 생성한다."""
        return f"{self.base_url}{path}"


class PreviewConfig(BaseModel):
    """선택 파일 미리보기 썸네일 설정 모델."""

    max_edge_px: int = Field(default=256, ge=16)


class ViewConfig(BaseModel):
    """결과 화면 모델 생성 설정."""

    placeholder_image_url: str = Field(
        default="https://placehold.co/256x256/E5E7EB/4B5563?text=No+Image",
        min_length=1,
    )
    short_id_length: int = Field(default=8, ge=1)


class SessionConfig(BaseModel):
    """검색 세션 컨트롤러 설정 모델."""

    service: MatchingServiceConfig
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    view: ViewConfig = Field(default_factory=ViewConfig)
    request_deadline_ms: int | None = Field(default=30_000, ge=1)

    @field_validator("request_deadline_ms")
    @classmethod
    def validate_deadline(cls, value: int | None, info) -> int | None:
        if value is None:
            return value
        service = info.data.get("service")
        if service is not None and value < service.timeout_ms:
            raise ValueError("request_deadline_ms는 service.timeout_ms 이상이어야 합니다")
        return value
