from typing import Generic, TypeVar

from pydantic import Field

from phangan_board.interfaces.schemas.base import ApiModel

T = TypeVar("T")


class PageResult(ApiModel, Generic[T]):
    content: list[T] = Field(default_factory=list)
    page: int = 0
    size: int = 0
    total_elements: int = 0
    total_pages: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.content
