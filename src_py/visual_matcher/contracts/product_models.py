"""
목적:
- 매칭 서비스 결과 상품 모델과 결과 필터 조건 모델을 정의한다.

설명:
- 서비스 응답의 순서를 그대로 보존하는 결과 항목 모델을 제공한다.
- 키워드/최소 유사도 필터 조건을 값 객체로 표현한다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/visual_matcher/matching/client.py
- src_py/visual_matcher/filtering/pipeline.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Product(BaseModel):
    """유사 상품 결과 항목 모델."""

    model_config = ConfigDict(frozen=True)

    product_id: str = Field(min_length=1)
    product_name: str = Field(default="")
    image_url: str = Field(default="")
    category: str = Field(default="")
    similarity_score: float = Field(ge=0.0, le=1.0)

    @field_validator("product_id", mode="before")
    @classmethod
    def coerce_product_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("product_name", "image_url", "category", mode="before")
    @classmethod
    def coerce_optional_text(cls, value: object) -> object:
        if value is None:
            return ""
        return value


class FilterCriteria(BaseModel):
    """결과 목록 필터 조건 모델."""

    model_config = ConfigDict(frozen=True)

    keyword: str = Field(default="")
    min_similarity: float = Field(default=0.0, ge=0.0, le=1.0)

    @property
    def is_identity(self) -> bool:
        """필터가 아무것도 걸러내지 않는 조건인지 반환한다."""
        return not self.keyword.strip() and self.min_similarity <= 0.0
