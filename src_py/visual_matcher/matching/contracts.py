"""
목적:
- 세션 컨트롤러가 소비하는 매칭 서비스 호출 계약을 정의한다.

설명:
- 파일 바이트 기반 검색과 원격 이미지 URL 기반 검색 두 연산만 노출한다.
- 전송/인코딩은 구현체(어댑터)의 책임이며, 실패는 NetworkError/ServiceError로 통일한다.

디자인 패턴:
- 포트(Port).

참조:
- src_py/visual_matcher/matching/client.py
- src_py/visual_matcher/session/controller.py
"""

from __future__ import annotations

from typing import Protocol

from visual_matcher.contracts.product_models import Product
from visual_matcher.contracts.query_models import Category


class MatchingService(Protocol):
    """유사 상품 매칭 서비스 포트."""

    async def search_by_file(
        self,
        *,
        filename: str,
        content: bytes,
        content_type: str,
        category: Category | None = None,
    ) -> list[Product]: ...

    async def search_by_url(
        self,
        *,
        image_url: str,
        category: Category | None = None,
    ) -> list[Product]: ...

    async def aclose(self) -> None: ...
