"""
목적:
- 매칭 서비스 HTTP 클라이언트를 제공한다.

설명:
- 파일 업로드(multipart)와 이미지 URL(form) 두 가지 검색 요청을 전송한다.
- 응답 본문의 `results` 배열을 상품 모델로 검증해 서비스 순위 그대로 반환한다.
- 전송 실패는 NetworkError, 비정상 응답은 ServiceError로 변환한다.

디자인 패턴:
- 어댑터(Adapter).

참조:
- src_py/visual_matcher/config/models.py
- src_py/visual_matcher/matching/contracts.py
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from visual_matcher.config.models import MatchingServiceConfig
from visual_matcher.contracts.product_models import Product
from visual_matcher.contracts.query_models import Category
from visual_matcher.exceptions import NetworkError, ServiceError


class MatchingServiceClient:
    """매칭 서비스 HTTP 클라이언트."""

    def __init__(
        self,
        config: MatchingServiceConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=config.timeout_ms / 1000.0)

    @property
    def config(self) -> MatchingServiceConfig:
        return self._config

    async def search_by_file(
        self,
        *,
        filename: str,
        content: bytes,
        content_type: str,
        category: Category | None = None,
    ) -> list[Product]:
        """이미지 파일 바이트로 유사 상품을 검색한다."""
        files = {"file": (filename, content, content_type)}
        return await self._request(
            self._config.file_search_path,
            data=_form_fields(category=category),
            files=files,
        )

    async def search_by_url(
        self,
        *,
        image_url: str,
        category: Category | None = None,
    ) -> list[Product]:
        """원격 이미지 URL로 유사 상품을 검색한다."""
        return await self._request(
            self._config.url_search_path,
            data=_form_fields(category=category, image_url=image_url),
        )

    async def aclose(self) -> None:
        """직접 생성한 httpx 클라이언트만 닫는다."""
        if self._owns_client:
            await self._client.aclose()

    async def _request(
        self,
        path: str,
        *,
        data: dict[str, str],
        files: dict[str, Any] | None = None,
    ) -> list[Product]:
        headers: dict[str, str] = {"Accept": "application/json"}
        if self._config.auth_token:
            headers["Authorization"] = f"Bearer {self._config.auth_token}"

        url = self._config.endpoint(path)
        try:
            response = await self._client.post(url, headers=headers, data=data, files=files)
        except httpx.HTTPError as exc:
            raise NetworkError(f"매칭 서비스 호출 실패: {exc}") from exc

        if response.is_error:
            raise ServiceError(
                f"매칭 서비스가 오류 상태를 반환했습니다: status={response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ServiceError(f"매칭 서비스 응답 JSON 파싱 실패: {exc}") from exc

        return _parse_results(payload)


def _form_fields(*, category: Category | None, **fields: str) -> dict[str, str]:
    form = dict(fields)
    if category:
        form["category"] = category
    return form


def _parse_results(payload: Any) -> list[Product]:
    if not isinstance(payload, dict):
        raise ServiceError("매칭 서비스 응답은 JSON 객체여야 합니다")

    raw_results = payload.get("results")
    if raw_results is None:
        return []
    if not isinstance(raw_results, list):
        raise ServiceError("매칭 서비스 응답 results가 배열이 아닙니다")

    try:
        return [Product.model_validate(item) for item in raw_results]
    except PydanticValidationError as exc:
        raise ServiceError(f"매칭 서비스 결과 항목 검증 실패: {exc}") from exc
