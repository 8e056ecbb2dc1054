"""
목적:
- 세션 컨트롤러 상태를 결과 화면용 뷰 모델로 조정한다.

설명:
- 로딩/초기 안내/결과 없음/결과 카드 중 어떤 영역을 보여줄지 결정한다.
- 렌더링 책임은 소비자 애플리케이션(화면 계층)이 가진다.

디자인 패턴:
- 조정자(Coordinator).

참조:
- src_py/visual_matcher/session/controller.py
- src_py/visual_matcher/contracts/session_models.py
"""

from __future__ import annotations

from visual_matcher.config.models import ViewConfig
from visual_matcher.contracts.product_models import Product
from visual_matcher.contracts.session_models import ProductCard, SessionView
from visual_matcher.session.controller import SearchSessionController


class ResultViewCoordinator:
    """세션 상태를 화면 뷰 모델로 변환하는 유틸 클래스."""

    def __init__(
        self,
        controller: SearchSessionController,
        config: ViewConfig | None = None,
    ) -> None:
        self._controller = controller
        self._config = config or controller.config.view

    def build_view(self) -> SessionView:
        """현재 세션 상태로 화면 뷰 모델을 생성한다."""
        controller = self._controller
        state = controller.search_state
        query = controller.query
        filtered = controller.filtered_results
        searched = state in ("LOADED", "LOADED_EMPTY")

        placeholder = None
        if state == "IDLE" and not controller.raw_results:
            placeholder = "initial"
        elif searched and not filtered:
            placeholder = "no_results"

        last_error = controller.last_error
        return SessionView(
            search_state=state,
            is_loading=state == "IN_FLIGHT",
            placeholder=placeholder,
            show_keyword_filter=searched,
            show_category_selector=query.has_input,
            selected_file_name=query.file.filename if query.file is not None else None,
            cards=[] if state == "IN_FLIGHT" else [self._to_card(item) for item in filtered],
            error_message=last_error.message if last_error is not None else None,
        )

    def _to_card(self, product: Product) -> ProductCard:
        return ProductCard(
            product_id=product.product_id,
            short_id=_shorten(product.product_id, self._config.short_id_length),
            product_name=product.product_name,
            image_url=product.image_url or self._config.placeholder_image_url,
            similarity_score=product.similarity_score,
        )


def _shorten(product_id: str, length: int) -> str:
    return f"{product_id[:length]}..."
