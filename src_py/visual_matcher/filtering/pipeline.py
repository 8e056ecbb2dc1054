"""
목적:
- 원본 검색 결과에서 화면 표시용 결과 목록을 계산한다.

설명:
- 최소 유사도 필터와 상품명 키워드 필터를 순서 보존 방식으로 적용한다.
- 키워드는 대소문자 무시 정규식으로 해석하며, 컴파일할 수 없는 패턴은 리터럴로 매칭한다.
- 입력이 같으면 출력도 항상 같은 순수 함수다.

디자인 패턴:
- 함수형 유틸 모듈(Function Utility Module).

참조:
- src_py/visual_matcher/contracts/product_models.py
- src_py/visual_matcher/session/controller.py
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

from visual_matcher.contracts.product_models import FilterCriteria, Product


@dataclass(frozen=True, slots=True)
class KeywordPattern:
    """컴파일된 키워드 매칭 패턴."""

    pattern: re.Pattern[str]
    literal: bool


@lru_cache(maxsize=64)
def compile_keyword(keyword: str) -> KeywordPattern | None:
    """키워드를 매칭 패턴으로 변환한다. 공백뿐인 키워드는 None이다."""
    text = keyword.strip()
    if not text:
        return None
    try:
        return KeywordPattern(pattern=re.compile(text, re.IGNORECASE), literal=False)
    except re.error:
        return KeywordPattern(pattern=re.compile(re.escape(text), re.IGNORECASE), literal=True)


def apply_filters(raw: Iterable[Product], criteria: FilterCriteria) -> tuple[Product, ...]:
    """필터 조건을 적용한 결과를 원본 순서 그대로 반환한다."""
    products = tuple(raw)
    if criteria.is_identity:
        return products

    keyword = compile_keyword(criteria.keyword)
    min_similarity = criteria.min_similarity

    return tuple(
        product
        for product in products
        if _passes_similarity(product, min_similarity) and _passes_keyword(product, keyword)
    )


def _passes_similarity(product: Product, min_similarity: float) -> bool:
    if min_similarity <= 0.0:
        return True
    return product.similarity_score >= min_similarity


def _passes_keyword(product: Product, keyword: KeywordPattern | None) -> bool:
    if keyword is None:
        return True
    return keyword.pattern.search(product.product_name) is not None
