"""
목적:
- 선택된 이미지 파일에서 파생되는 미리보기 자원을 생성/해제한다.

설명:
- Pillow로 파일 바이트를 디코드해 썸네일을 만든다.
- 생성/해제 횟수를 집계해 자원 누수 여부를 외부에서 검증할 수 있게 한다.

디자인 패턴:
- 팩토리(Factory) + 명시적 자원 해제(Explicit Release).

참조:
- src_py/visual_matcher/capture/input_capture.py
- src_py/visual_matcher/config/models.py
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field

from PIL import Image, UnidentifiedImageError

from visual_matcher.config.models import PreviewConfig
from visual_matcher.contracts.query_models import FileHandle
from visual_matcher.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PreviewResource:
    """선택 파일 1개에 대응하는 썸네일 자원."""

    source_name: str
    image: Image.Image | None
    size: tuple[int, int]
    _factory: "PreviewFactory | None" = field(default=None, repr=False)

    @property
    def released(self) -> bool:
        return self.image is None

    def release(self) -> None:
        """썸네일을 닫고 팩토리에 해제를 통보한다. 두 번째 호출부터는 무시한다."""
        if self.image is None:
            return
        self.image.close()
        self.image = None
        if self._factory is not None:
            self._factory._on_release(self)


class PreviewFactory:
    """미리보기 자원 생성기."""

    def __init__(self, config: PreviewConfig | None = None) -> None:
        self._config = config or PreviewConfig()
        self._created = 0
        self._released = 0

    @property
    def created(self) -> int:
        return self._created

    @property
    def released(self) -> int:
        return self._released

    @property
    def outstanding(self) -> int:
        """아직 해제되지 않은 자원 개수를 반환한다."""
        return self._created - self._released

    def create(self, handle: FileHandle) -> PreviewResource:
        """파일 바이트를 디코드해 썸네일 자원을 생성한다."""
        try:
            with Image.open(io.BytesIO(handle.content)) as source:
                source.load()
                thumbnail = source.copy()
        except (UnidentifiedImageError, OSError, ValueError, Image.DecompressionBombError) as exc:
            raise ValidationError(
                f"이미지로 해석할 수 없는 파일입니다: filename={handle.filename}"
            ) from exc

        edge = self._config.max_edge_px
        thumbnail.thumbnail((edge, edge))

        self._created += 1
        logger.debug("미리보기 생성: filename=%s size=%s", handle.filename, thumbnail.size)
        return PreviewResource(
            source_name=handle.filename,
            image=thumbnail,
            size=thumbnail.size,
            _factory=self,
        )

    def _on_release(self, resource: PreviewResource) -> None:
        self._released += 1
        logger.debug("미리보기 해제: filename=%s", resource.source_name)
