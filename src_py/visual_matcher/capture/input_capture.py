"""
목적:
- 검색 질의 입력(파일/URL/카테고리)과 미리보기 자원을 소유한다.

설명:
- 파일과 URL은 상호 배타적이며, 하나를 지정하면 다른 하나는 비워진다.
- 파일을 교체/해제하는 모든 전이에서 미리보기 자원의 생성과 해제를 짝지어 수행한다.

디자인 패턴:
- 상태 소유자(State Owner).

참조:
- src_py/visual_matcher/capture/preview.py
- src_py/visual_matcher/contracts/query_models.py
"""

from __future__ import annotations

from typing import cast

from visual_matcher.capture.preview import PreviewFactory, PreviewResource
from visual_matcher.contracts.query_models import CATEGORIES, Category, FileHandle, Query
from visual_matcher.exceptions import ValidationError


class InputCapture:
    """검색 질의 입력 상태 클래스."""

    def __init__(self, preview_factory: PreviewFactory | None = None) -> None:
        self._previews = preview_factory or PreviewFactory()
        self._file: FileHandle | None = None
        self._url = ""
        self._category: Category | None = None
        self._preview: PreviewResource | None = None

    @property
    def query(self) -> Query:
        """현재 입력의 불변 스냅샷을 반환한다."""
        return Query(file=self._file, url=self._url, category=self._category)

    @property
    def preview(self) -> PreviewResource | None:
        return self._preview

    @property
    def preview_factory(self) -> PreviewFactory:
        return self._previews

    def set_file(self, handle: FileHandle) -> None:
        """파일을 선택하고 URL을 비운다."""
        # 새 미리보기를 먼저 만들어, 디코드 실패 시 기존 상태를 보존한다.
        preview = self._previews.create(handle)
        self._release_preview()
        self._url = ""
        self._file = handle
        self._preview = preview

    def set_url(self, text: str) -> None:
        """URL 텍스트를 저장하고 선택된 파일을 비운다."""
        self._release_preview()
        self._file = None
        self._url = text

    def set_category(self, value: str | None) -> None:
        """카테고리를 지정한다. None 또는 빈 문자열은 전체 카테고리다."""
        if value is None or value == "":
            self._category = None
            return
        if value not in CATEGORIES:
            raise ValidationError(
                f"지원하지 않는 카테고리입니다: {value} (허용: {', '.join(CATEGORIES)})"
            )
        self._category = cast(Category, value)

    def clear(self) -> None:
        """파일/URL 입력과 미리보기를 비운다. 카테고리는 유지한다."""
        self._release_preview()
        self._file = None
        self._url = ""

    def reset(self) -> None:
        """카테고리까지 포함해 모든 입력을 초기화한다."""
        self.clear()
        self._category = None

    def close(self) -> None:
        """세션 종료 시 미리보기 자원을 해제하고 파일/URL 입력을 비운다."""
        self.clear()

    def _release_preview(self) -> None:
        if self._preview is not None:
            self._preview.release()
            self._preview = None
