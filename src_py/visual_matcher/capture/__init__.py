"""
목적:
- 입력 캡처 계층의 공개 진입점을 제공한다.

설명:
- 질의 입력 상태 클래스와 미리보기 자원 팩토리를 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/visual_matcher/capture/input_capture.py
- src_py/visual_matcher/capture/preview.py
"""

from .input_capture import InputCapture
from .preview import PreviewFactory, PreviewResource

__all__ = ["InputCapture", "PreviewFactory", "PreviewResource"]
