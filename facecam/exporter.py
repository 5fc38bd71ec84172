"""
JPEG export of frames for dataset building.
Each run writes into its own session folder:
  <assets>/<session id>/<time id>.jpg
JPEG quality defaults to 75, the usual encoder default.
"""

from __future__ import annotations
import time
from pathlib import Path
from typing import Optional, Union
import cv2
import numpy as np


def new_session_id() -> str:
    return str(time.time_ns())


class SessionExporter:
    def __init__(self, assets_dir: Union[str, Path], session_id: Optional[str] = None, jpeg_quality: int = 75):
        self.assets_dir = Path(assets_dir)
        self.session_id = session_id or new_session_id()
        self.jpeg_quality = int(jpeg_quality)
        self.session_folder = self.assets_dir / self.session_id
        self.count = 0
        self._last_id = 0

    def start(self) -> Path:
        self.session_folder.mkdir(parents=True, exist_ok=True)
        print(f"[export] writing frames to {self.session_folder}")
        return self.session_folder

    def _next_id(self) -> int:
        # strictly increasing, even when the clock has not advanced
        t = time.time_ns()
        if t <= self._last_id:
            t = self._last_id + 1
        self._last_id = t
        return t

    def export(self, image: np.ndarray) -> Path:
        if image is None or image.size == 0:
            raise RuntimeError("Cannot export an empty image")
        if not self.session_folder.is_dir():
            self.start()

        path = self.session_folder / f"{self._next_id()}.jpg"
        ok = cv2.imwrite(str(path), image, [cv2.IMWRITE_JPEG_QUALITY, self.jpeg_quality])
        if not ok:
            raise RuntimeError(f"Failed to write image: {path}")
        self.count += 1
        return path
