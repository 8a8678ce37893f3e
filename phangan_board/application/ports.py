"""Capability interfaces for collaborators that live outside the core.

Rendering, routing, translations and the image lightbox are supplied by the
front-end in use; services only see these protocols.
"""

from collections.abc import Sequence
from typing import Protocol

from phangan_board.interfaces.schemas.ad import AdImage


class Translator(Protocol):
    def __call__(self, key: str) -> str: ...


class Router(Protocol):
    def navigate(self, path: str, *, replace: bool = False) -> None: ...


class ImageViewer(Protocol):
    def open(self, images: Sequence[AdImage], start_index: int = 0, *, title: str = "") -> None: ...
