from collections.abc import Sequence
from typing import TextIO

from phangan_board.interfaces.schemas.ad import AdImage


class ConsoleRouter:
    """Terminal stand-in for browser navigation: records and announces the target path."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.history: list[str] = []

    def navigate(self, path: str, *, replace: bool = False) -> None:
        if replace and self.history:
            self.history[-1] = path
        else:
            self.history.append(path)
        print(f"-> {path}", file=self.stream)


class ConsoleImageViewer:
    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def open(self, images: Sequence[AdImage], start_index: int = 0, *, title: str = "") -> None:
        for position, image in enumerate(images):
            marker = ">" if position == start_index else " "
            label = f"{title} - Image {position + 1}" if title else f"Image {position + 1}"
            print(f"{marker} [{image.id}] {label}: {image.url}", file=self.stream)
