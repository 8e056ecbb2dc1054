"""
목적:
- 루트 `.env`를 읽어 SearchSessionController를 실행하는 드라이버 스크립트를 제공한다.

설명:
- 라이브러리 본체는 환경 파일을 직접 읽지 않는다.
- 이 스크립트는 입력 지정 -> 검색 제출 -> 결과 필터 -> 뷰 출력 흐름을 데모한다.

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/visual_matcher/config/env.py
- src_py/visual_matcher/session/controller.py
- src_py/visual_matcher/orchestration/coordinator.py
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import mimetypes
import os
import sys
from pathlib import Path

from visual_matcher import (
    CATEGORIES,
    FileHandle,
    ResultViewCoordinator,
    SearchSessionController,
    session_config_from_env,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Visual Matcher 드라이버")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", type=Path, help="업로드할 이미지 파일 경로")
    source.add_argument("--url", help="검색할 원격 이미지 URL")
    parser.add_argument("--category", choices=CATEGORIES, default=None, help="카테고리 범위")
    parser.add_argument("--keyword", default="", help="상품명 키워드 필터 (정규식)")
    parser.add_argument("--min-similarity", type=float, default=0.0, help="최소 유사도 (0~1)")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="루트 기준 환경 파일 경로 (기본: .env)",
    )
    parser.add_argument("--log-level", default="INFO", help="로그 레벨 (기본: INFO)")
    return parser.parse_args()


def load_env_file(path: Path) -> None:
    if not path.exists():
        return

    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        os.environ.setdefault(key, value)


def read_file_handle(path: Path) -> FileHandle:
    content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    return FileHandle(filename=path.name, content=path.read_bytes(), content_type=content_type)


async def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    repo_root = Path(__file__).resolve().parents[1]
    load_env_file(repo_root / args.env_file)
    config = session_config_from_env(os.environ)

    async with SearchSessionController(config=config) as controller:
        if args.file is not None:
            controller.set_file(read_file_handle(args.file))
        else:
            controller.set_url(args.url)
        controller.set_category(args.category)
        controller.set_keyword(args.keyword)
        controller.set_min_similarity(args.min_similarity)

        outcome = await controller.submit()
        print("[submit]", outcome.model_dump_json())

        view = ResultViewCoordinator(controller).build_view()
        print("[view]", view.model_dump_json(indent=2))

        if outcome.error is not None:
            return 1
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(asyncio.run(main()))
    except Exception as exc:  # noqa: BLE001
        print(f"[error] {exc}", file=sys.stderr)
        raise SystemExit(1)
