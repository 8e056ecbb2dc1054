"""
목적:
- Visual Matcher 라이브러리의 예외 타입을 표준화한다.

설명:
- 입력 검증 실패와 매칭 서비스 호출 실패를 명시적으로 구분해
  세션 컨트롤러가 복구 전략을 선택할 수 있게 한다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/visual_matcher/session/controller.py
- src_py/visual_matcher/matching/client.py
"""


class VisualMatcherError(Exception):
    """Visual Matcher 공통 베이스 예외."""


class ConfigurationError(VisualMatcherError):
    """설정값이 유효하지 않을 때 발생한다."""


class ValidationError(VisualMatcherError):
    """사용자 입력(파일/URL/카테고리/필터)이 유효하지 않을 때 발생한다."""


class DispatchError(VisualMatcherError):
    """매칭 서비스 호출 실패의 공통 베이스 예외."""


class NetworkError(DispatchError):
    """전송 계층 오류 또는 시간 초과로 응답을 받지 못했을 때 발생한다."""


class ServiceError(DispatchError):
    """매칭 서비스가 비정상 상태 코드나 잘못된 본문을 반환했을 때 발생한다."""
