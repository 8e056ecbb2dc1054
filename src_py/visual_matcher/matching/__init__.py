"""
목적:
- 매칭 서비스 경계 계층의 공개 진입점을 제공한다.

설명:
- 서비스 포트와 HTTP 어댑터 구현을 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/visual_matcher/matching/contracts.py
- src_py/visual_matcher/matching/client.py
"""

from .client import MatchingServiceClient
from .contracts import MatchingService

__all__ = ["MatchingService", "MatchingServiceClient"]
