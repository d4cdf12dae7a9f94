"""Collects RGBA frames and writes them out as an animated WebP file."""

from __future__ import annotations

import os
from pathlib import Path

from PIL import Image

from .errors import CoTigraphyError, ErrorCode, require

FRAME_DELAY_MS = 80
QUALITY = 90


class WebPWriter:
    """Builds an animation from RGBA8888 frames of a fixed size."""

    frame_delay_ms = FRAME_DELAY_MS

    def __init__(self, width: int, height: int) -> None:
        require(width > 0, "width must be positive")
        require(height > 0, "height must be positive")
        self.width = width
        self.height = height
        self._frames: list[Image.Image] = []

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    def add_frame(self, rgba: bytes | bytearray | memoryview) -> bool:
        """Append one frame of ``width * height * 4`` RGBA bytes."""
        data = bytes(rgba)
        require(
            len(data) == self.width * self.height * 4,
            "frame buffer size does not match width * height * 4",
        )
        self._frames.append(Image.frombytes("RGBA", (self.width, self.height), data))
        return True

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the frames to ``path``, which must end in ``.webp`` (any case)."""
        text = os.fspath(path)
        require(text != "", "file name must not be empty")
        target = Path(text)
        if target.suffix.lower() != ".webp":
            raise CoTigraphyError(
                ErrorCode.INVALID_FILE_EXTENSION, f"not a .webp file name: {text}"
            )
        if not target.stem:
            raise CoTigraphyError(ErrorCode.MISSING_FILE_NAME, f"missing file name: {text}")
        require(self._frames, "at least one frame must be added before saving")

        first, *rest = self._frames
        try:
            first.save(
                target,
                format="WEBP",
                save_all=True,
                append_images=rest,
                duration=self.frame_delay_ms,
                loop=0,
                quality=QUALITY,
            )
        except OSError as exc:
            raise CoTigraphyError(ErrorCode.FILE_IO_FAILURE, str(exc)) from exc