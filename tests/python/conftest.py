from __future__ import annotations

import asyncio
import io

import pytest
from PIL import Image

from visual_matcher import (
    FileHandle,
    MatchingServiceConfig,
    Product,
    SearchSessionController,
    SessionConfig,
)


def make_image_bytes(size: tuple[int, int] = (640, 480), fmt: str = "PNG") -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color=(200, 30, 30)).save(buffer, format=fmt)
    return buffer.getvalue()


def make_file(name: str = "shirt.png", size: tuple[int, int] = (640, 480)) -> FileHandle:
    return FileHandle(filename=name, content=make_image_bytes(size), content_type="image/png")


def make_product(name: str, score: float, product_id: str | None = None) -> Product:
    return Product(
        product_id=product_id or f"id-{name.lower().replace(' ', '-')}",
        product_name=name,
        image_url=f"https://cdn.example.com/{name.lower().replace(' ', '_')}.jpg",
        category="Men",
        similarity_score=score,
    )


async def settle(rounds: int = 5) -> None:
    for _ in range(rounds):
        await asyncio.sleep(0)


class FakeMatchingService:
    """호출 기록/응답 게이트를 가진 테스트용 매칭 서비스."""

    def __init__(
        self,
        results: list[Product] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.results = list(results or [])
        self.error = error
        self.gate: asyncio.Event | None = None
        self.calls: list[tuple[str, dict[str, object]]] = []
        self.closed = False

    async def search_by_file(self, *, filename, content, content_type, category=None):
        self.calls.append(
            (
                "file",
                {
                    "filename": filename,
                    "content": content,
                    "content_type": content_type,
                    "category": category,
                },
            )
        )
        return await self._respond()

    async def search_by_url(self, *, image_url, category=None):
        self.calls.append(("url", {"image_url": image_url, "category": category}))
        return await self._respond()

    async def aclose(self) -> None:
        self.closed = True

    async def _respond(self) -> list[Product]:
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return list(self.results)


@pytest.fixture
def session_config() -> SessionConfig:
    return SessionConfig(
        service=MatchingServiceConfig(base_url="http://matcher.test", timeout_ms=100),
        request_deadline_ms=1_000,
    )


@pytest.fixture
def sample_products() -> list[Product]:
    return [make_product("Red Shirt", 0.72), make_product("Blue Jeans", 0.45)]


def make_controller(
    config: SessionConfig,
    service: FakeMatchingService,
) -> SearchSessionController:
    return SearchSessionController(config=config, service=service)
