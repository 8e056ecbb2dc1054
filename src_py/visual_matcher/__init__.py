"""
목적:
- Visual Matcher Python 패키지의 공개 진입점을 제공한다.

설명:
- 라이브러리 핵심 클래스는 `SearchSessionController`다.
- 설정/계약 모델/예외/매칭 서비스 어댑터/필터 함수를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/visual_matcher/session/controller.py
- src_py/visual_matcher/matching/client.py
"""

from .capture import InputCapture, PreviewFactory, PreviewResource
from .config.env import session_config_from_env
from .config.models import (
    MatchingServiceConfig,
    PreviewConfig,
    SessionConfig,
    ViewConfig,
)
from .contracts import (
    CATEGORIES,
    Category,
    FileHandle,
    FilterCriteria,
    Product,
    ProductCard,
    Query,
    SearchState,
    SessionError,
    SessionSnapshot,
    SessionView,
    SubmitOutcome,
)
from .exceptions import (
    ConfigurationError,
    DispatchError,
    NetworkError,
    ServiceError,
    ValidationError,
    VisualMatcherError,
)
from .filtering import apply_filters, compile_keyword
from .matching import MatchingService, MatchingServiceClient
from .orchestration import ResultViewCoordinator
from .session import SearchSessionController
from .version import __version__

__all__ = [
    "__version__",
    "SearchSessionController",
    "ResultViewCoordinator",
    "InputCapture",
    "PreviewFactory",
    "PreviewResource",
    "MatchingService",
    "MatchingServiceClient",
    "apply_filters",
    "compile_keyword",
    "SessionConfig",
    "MatchingServiceConfig",
    "PreviewConfig",
    "ViewConfig",
    "session_config_from_env",
    "CATEGORIES",
    "Category",
    "FileHandle",
    "Query",
    "Product",
    "FilterCriteria",
    "SearchState",
    "SessionError",
    "SubmitOutcome",
    "SessionSnapshot",
    "ProductCard",
    "SessionView",
    "VisualMatcherError",
    "ConfigurationError",
    "ValidationError",
    "DispatchError",
    "NetworkError",
    "ServiceError",
]
