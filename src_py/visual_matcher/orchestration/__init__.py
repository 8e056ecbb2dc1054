"""
목적:
- 화면 조정 계층의 공개 진입점을 제공한다.

설명:
- 세션 상태를 결과 화면 뷰 모델로 바꾸는 조정자를 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/visual_matcher/orchestration/coordinator.py
"""

from .coordinator import ResultViewCoordinator

__all__ = ["ResultViewCoordinator"]
