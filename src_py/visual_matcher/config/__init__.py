"""
목적:
- 설정 모델 계층의 공개 진입점을 제공한다.

설명:
- 라이브러리는 `.env`를 직접 읽지 않고, 외부에서 생성된 설정 객체를 주입받는다.

디자인 패턴:
- 설정 객체(Configuration Object).

참조:
- src_py/visual_matcher/config/models.py
"""

from .env import REQUIRED_ENV_KEYS, session_config_from_env
from .models import (
    MatchingServiceConfig,
    PreviewConfig,
    SessionConfig,
    ViewConfig,
)

__all__ = [
    "MatchingServiceConfig",
    "PreviewConfig",
    "ViewConfig",
    "SessionConfig",
    "REQUIRED_ENV_KEYS",
    "session_config_from_env",
]
