"""
목적:
- 검색 세션 계층의 공개 진입점을 제공한다.

설명:
- 세션 컨트롤러 클래스를 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/visual_matcher/session/controller.py
"""

from .controller import SearchSessionController

__all__ = ["SearchSessionController"]
