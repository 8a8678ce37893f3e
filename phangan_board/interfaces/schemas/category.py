from phangan_board.interfaces.schemas.base import ApiModel


class Category(ApiModel):
    id: int
    name: str
    description: str | None = None
