"""
목적:
- Python 계약 모델 계층의 공개 심볼을 제공한다.

설명:
- 질의/상품/세션 상태 모델을 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/visual_matcher/contracts/query_models.py
- src_py/visual_matcher/contracts/product_models.py
- src_py/visual_matcher/contracts/session_models.py
"""

from .product_models import FilterCriteria, Product
from .query_models import CATEGORIES, Category, FileHandle, Query, SourceKind
from .session_models import (
    ErrorKind,
    ProductCard,
    SearchState,
    SessionError,
    SessionSnapshot,
    SessionView,
    SubmitOutcome,
)

__all__ = [
    "CATEGORIES",
    "Category",
    "SourceKind",
    "FileHandle",
    "Query",
    "Product",
    "FilterCriteria",
    "SearchState",
    "ErrorKind",
    "SessionError",
    "SubmitOutcome",
    "SessionSnapshot",
    "ProductCard",
    "SessionView",
]
