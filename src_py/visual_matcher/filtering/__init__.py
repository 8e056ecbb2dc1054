"""
목적:
- 결과 필터 계층의 공개 진입점을 제공한다.

설명:
- 순수 필터 함수와 키워드 패턴 컴파일러를 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/visual_matcher/filtering/pipeline.py
"""

from .pipeline import KeywordPattern, apply_filters, compile_keyword

__all__ = ["KeywordPattern", "apply_filters", "compile_keyword"]
