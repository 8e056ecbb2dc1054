"""
목적:
- 시각 검색 세션 컨트롤러 클래스를 제공한다.

설명:
- 질의 입력 상태를 소유하고, 매칭 서비스 호출을 한 번에 하나만 허용한다.
- 검색 성공 시 원본 결과를 원자적으로 교체하고 필터 결과를 즉시 다시 계산한다.
- 검색 실패/기한 초과/취소는 호출자에게 던지지 않고 직전 안정 상태로 복구한 뒤 오류를 노출한다.
- 모든 변경 연산 뒤에는 필터 결과를 동기적으로 재계산한다.

디자인 패턴:
- 상태 머신(State Machine) + 서비스 레이어(Service Layer).

참조:
- src_py/visual_matcher/capture/input_capture.py
- src_py/visual_matcher/matching/client.py
- src_py/visual_matcher/filtering/pipeline.py
- src_py/visual_matcher/contracts/session_models.py
"""

from __future__ import annotations

import asyncio
import logging

from pydantic import ValidationError as PydanticValidationError

from visual_matcher.capture.input_capture import InputCapture
from visual_matcher.capture.preview import PreviewFactory, PreviewResource
from visual_matcher.config.models import SessionConfig
from visual_matcher.contracts.product_models import FilterCriteria, Product
from visual_matcher.contracts.query_models import FileHandle, Query
from visual_matcher.contracts.session_models import (
    ErrorKind,
    SearchState,
    SessionError,
    SessionSnapshot,
    SubmitOutcome,
)
from visual_matcher.exceptions import (
    NetworkError,
    ServiceError,
    ValidationError,
    VisualMatcherError,
)
from visual_matcher.filtering.pipeline import apply_filters
from visual_matcher.matching.client import MatchingServiceClient
from visual_matcher.matching.contracts import MatchingService

logger = logging.getLogger(__name__)


class SearchSessionController:
    """단일 비행(single-flight) 검색 세션 컨트롤러."""

    def __init__(
        self,
        config: SessionConfig,
        service: MatchingService | None = None,
        input_capture: InputCapture | None = None,
    ) -> None:
        self._config = config
        self._owns_service = service is None
        self._service: MatchingService = service or MatchingServiceClient(config.service)
        self._input = input_capture or InputCapture(PreviewFactory(config.preview))

        self._state: SearchState = "IDLE"
        self._settled_state: SearchState = "IDLE"
        self._raw_results: tuple[Product, ...] = ()
        self._criteria = FilterCriteria()
        self._filtered_results: tuple[Product, ...] = ()
        self._last_error: SessionError | None = None

        self._pending: asyncio.Future[list[Product]] | None = None
        self._cancel_requested = False
        self._closed = False

    async def __aenter__(self) -> "SearchSessionController":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def search_state(self) -> SearchState:
        return self._state

    @property
    def query(self) -> Query:
        return self._input.query

    @property
    def preview(self) -> PreviewResource | None:
        return self._input.preview

    @property
    def preview_factory(self) -> PreviewFactory:
        return self._input.preview_factory

    @property
    def filter_criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def raw_results(self) -> tuple[Product, ...]:
        return self._raw_results

    @property
    def filtered_results(self) -> tuple[Product, ...]:
        return self._filtered_results

    @property
    def last_error(self) -> SessionError | None:
        return self._last_error

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self) -> SessionSnapshot:
        """화면 계층이 읽을 세션 스냅샷을 생성한다."""
        return SessionSnapshot(
            search_state=self._state,
            query=self._input.query,
            filter_criteria=self._criteria,
            raw_results=list(self._raw_results),
            filtered_results=list(self._filtered_results),
            last_error=self._last_error,
        )

    # 입력 변경 연산

    def set_file(self, handle: FileHandle) -> None:
        self._ensure_open()
        self._input.set_file(handle)

    def set_url(self, text: str) -> None:
        self._ensure_open()
        self._input.set_url(text)

    def set_category(self, value: str | None) -> None:
        self._ensure_open()
        self._input.set_category(value)

    def clear_input(self) -> None:
        self._ensure_open()
        self._input.clear()

    # 필터 변경 연산

    def set_keyword(self, keyword: str) -> None:
        """상품명 키워드 필터를 지정하고 결과를 다시 계산한다."""
        self._ensure_open()
        self._update_criteria(keyword=keyword, min_similarity=self._criteria.min_similarity)

    def set_min_similarity(self, value: float) -> None:
        """최소 유사도 필터를 지정하고 결과를 다시 계산한다. 0은 필터 없음이다."""
        self._ensure_open()
        self._update_criteria(keyword=self._criteria.keyword, min_similarity=value)

    def reset_filters(self) -> None:
        self._ensure_open()
        self._criteria = FilterCriteria()
        self._recompute()

    # 검색 디스패치

    async def submit(self) -> SubmitOutcome:
        """현재 입력으로 검색을 1회 실행한다."""
        self._ensure_open()

        if self._state == "IN_FLIGHT":
            logger.debug("검색 요청이 진행 중이므로 제출을 무시합니다")
            return SubmitOutcome(
                dispatched=False,
                state=self._state,
                result_count=len(self._raw_results),
                error=self._last_error,
            )

        query = self._input.query
        source_kind = query.source_kind
        if source_kind is None:
            raise ValidationError("검색할 이미지 파일 또는 이미지 URL을 먼저 입력해야 합니다")

        self._settled_state = self._state
        self._state = "IN_FLIGHT"
        self._cancel_requested = False
        logger.info("검색 요청 시작: source=%s category=%s", source_kind, query.category or "ALL")

        pending = asyncio.ensure_future(self._dispatch(query))
        self._pending = pending
        deadline = self._deadline()
        try:
            async with deadline:
                results = await pending
        except asyncio.CancelledError:
            if not self._cancel_requested:
                self._state = self._settled_state
                raise
            return self._fail("canceled", "검색 요청이 취소되었습니다")
        except TimeoutError as exc:
            if not deadline.expired():
                return self._fail("network", f"매칭 서비스 호출 시간 초과: {exc}")
            return self._fail(
                "network",
                f"매칭 서비스 응답 기한을 초과했습니다: deadline_ms={self._config.request_deadline_ms}",
            )
        except NetworkError as exc:
            return self._fail("network", str(exc))
        except ServiceError as exc:
            return self._fail("service", str(exc))
        except Exception:
            self._state = self._settled_state
            raise
        finally:
            self._pending = None
            self._cancel_requested = False

        return self._succeed(results)

    def cancel(self) -> bool:
        """진행 중인 검색 요청을 취소한다. 취소할 요청이 없으면 False를 반환한다."""
        if self._pending is None or self._pending.done():
            return False
        self._cancel_requested = True
        self._pending.cancel()
        logger.info("검색 요청 취소를 요청했습니다")
        return True

    async def aclose(self) -> None:
        """세션을 종료하고 진행 중 요청/미리보기/서비스 클라이언트를 정리한다."""
        if self._closed:
            return
        self._closed = True
        self.cancel()
        self._input.close()
        if self._owns_service:
            await self._service.aclose()

    async def _dispatch(self, query: Query) -> list[Product]:
        if query.file is not None:
            return await self._service.search_by_file(
                filename=query.file.filename,
                content=query.file.content,
                content_type=query.file.content_type,
                category=query.category,
            )
        return await self._service.search_by_url(
            image_url=query.url.strip(),
            category=query.category,
        )

    def _deadline(self) -> asyncio.Timeout:
        deadline_ms = self._config.request_deadline_ms
        return asyncio.timeout(None if deadline_ms is None else deadline_ms / 1000.0)

    def _ensure_open(self) -> None:
        if self._closed:
            raise VisualMatcherError("이미 종료된 검색 세션입니다")

    def _succeed(self, results: list[Product]) -> SubmitOutcome:
        self._raw_results = tuple(results)
        self._recompute()
        self._state = "LOADED" if self._raw_results else "LOADED_EMPTY"
        self._last_error = None
        self._input.reset()
        logger.info(
            "검색 요청 완료: state=%s raw=%d filtered=%d",
            self._state,
            len(self._raw_results),
            len(self._filtered_results),
        )
        return SubmitOutcome(
            dispatched=True,
            state=self._state,
            result_count=len(self._raw_results),
        )

    def _fail(self, kind: ErrorKind, message: str) -> SubmitOutcome:
        self._state = self._settled_state
        self._last_error = SessionError(kind=kind, message=message)
        logger.warning("검색 요청 실패: kind=%s message=%s", kind, message)
        return SubmitOutcome(
            dispatched=True,
            state=self._state,
            result_count=len(self._raw_results),
            error=self._last_error,
        )

    def _update_criteria(self, *, keyword: str, min_similarity: float) -> None:
        try:
            criteria = FilterCriteria(keyword=keyword, min_similarity=min_similarity)
        except PydanticValidationError as exc:
            raise ValidationError(f"필터 조건이 유효하지 않습니다: {exc}") from exc
        self._criteria = criteria
        self._recompute()

    def _recompute(self) -> None:
        self._filtered_results = apply_filters(self._raw_results, self._criteria)
        logger.debug(
            "필터 결과 재계산: raw=%d filtered=%d keyword=%r min_similarity=%.3f",
            len(self._raw_results),
            len(self._filtered_results),
            self._criteria.keyword,
            self._criteria.min_similarity,
        )
