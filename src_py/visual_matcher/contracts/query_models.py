"""
목적:
- 검색 질의 입력 인터페이스 모델을 정의한다.

설명:
- 파일/URL 중 하나만 선택되는 질의 소스와 선택적 카테고리를 표현한다.
- 모델은 불변 스냅샷이며, 상태 변경은 InputCapture가 담당한다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/visual_matcher/capture/input_capture.py
- src_py/visual_matcher/session/controller.py
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Category = Literal["Men", "Women", "Kids"]
SourceKind = Literal["file", "url"]

CATEGORIES: tuple[str, ...] = ("Men", "Women", "Kids")


class FileHandle(BaseModel):
    """업로드 대상 이미지 파일 모델."""

    model_config = ConfigDict(frozen=True)

    filename: str = Field(min_length=1)
    content: bytes = Field(min_length=1, repr=False)
    content_type: str = Field(default="application/octet-stream", min_length=1)


class Query(BaseModel):
    """검색 질의 스냅샷 모델."""

    model_config = ConfigDict(frozen=True)

    file: FileHandle | None = Field(default=None)
    url: str = Field(default="")
    category: Category | None = Field(default=None)

    @model_validator(mode="after")
    def validate_exclusive_source(self) -> "Query":
        if self.file is not None and self.url:
            raise ValueError("file과 url은 동시에 지정할 수 없습니다")
        return self

    @property
    def source_kind(self) -> SourceKind | None:
        """제출 가능한 질의 소스 종류를 반환한다."""
        if self.file is not None:
            return "file"
        if self.url.strip():
            return "url"
        return None

    @property
    def has_input(self) -> bool:
        """파일 또는 URL 입력이 존재하는지 반환한다."""
        return self.file is not None or bool(self.url)
