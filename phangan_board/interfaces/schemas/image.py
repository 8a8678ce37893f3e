import mimetypes
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ImageUpload:
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @classmethod
    def from_path(cls, path: Path) -> "ImageUpload":
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(filename=path.name, content=path.read_bytes(), content_type=content_type or "application/octet-stream")

    def as_multipart(self) -> tuple[str, tuple[str, bytes, str]]:
        return ("files", (self.filename, self.content, self.content_type))
