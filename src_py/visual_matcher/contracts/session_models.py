"""
목적:
- 검색 세션 상태/결과 인터페이스 모델을 정의한다.

설명:
- 세션 상태를 문자열 상수로 통일하고 화면 계층이 읽는 스냅샷 모델로 재사용한다.

디자인 패턴:
- 상태 객체(State DTO).

참조:
- src_py/visual_matcher/session/controller.py
- src_py/visual_matcher/orchestration/coordinator.py
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .product_models import FilterCriteria, Product
from .query_models import Query

SearchState = Literal["IDLE", "IN_FLIGHT", "LOADED", "LOADED_EMPTY"]
ErrorKind = Literal["network", "service", "canceled"]


class SessionError(BaseModel):
    """마지막으로 노출된 검색 실패 정보 모델."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str = Field(min_length=1)


class SubmitOutcome(BaseModel):
    """검색 제출 1회의 처리 결과 모델."""

    dispatched: bool
    state: SearchState
    result_count: int = Field(default=0, ge=0)
    error: SessionError | None = Field(default=None)


class SessionSnapshot(BaseModel):
    """화면 계층이 읽는 세션 전체 스냅샷 모델."""

    search_state: SearchState
    query: Query
    filter_criteria: FilterCriteria
    raw_results: list[Product] = Field(default_factory=list)
    filtered_results: list[Product] = Field(default_factory=list)
    last_error: SessionError | None = Field(default=None)


class ProductCard(BaseModel):
    """결과 카드 1개의 표시 모델."""

    product_id: str = Field(min_length=1)
    short_id: str = Field(min_length=1)
    product_name: str
    image_url: str = Field(min_length=1)
    similarity_score: float = Field(ge=0.0, le=1.0)


class SessionView(BaseModel):
    """결과 화면 렌더링용 뷰 모델."""

    search_state: SearchState
    is_loading: bool
    placeholder: Literal["initial", "no_results"] | None = Field(default=None)
    show_keyword_filter: bool
    show_category_selector: bool
    selected_file_name: str | None = Field(default=None)
    cards: list[ProductCard] = Field(default_factory=list)
    error_message: str | None = Field(default=None)
