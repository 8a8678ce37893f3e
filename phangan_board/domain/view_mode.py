from enum import Enum


class ViewMode(str, Enum):
    grid = "grid"
    list = "list"
