from pathlib import Path
from typing import List, Optional

import cv2
import numpy as np


def make_face_image(seed: int, size: int = 256) -> np.ndarray:
    """Deterministic grayscale texture standing in for a face crop."""
    rng = np.random.default_rng(seed)
    small = rng.integers(0, 256, size=(size // 8, size // 8), dtype=np.uint8)
    return cv2.resize(small, (size, size), interpolation=cv2.INTER_CUBIC)


def write_jpgs(folder: Path, seeds: List[int], size: int = 256) -> List[Path]:
    folder.mkdir(parents=True, exist_ok=True)
    paths = []
    for s in seeds:
        p = folder / f"face_{s:03d}.jpg"
        assert cv2.imwrite(str(p), make_face_image(s, size))
        paths.append(p)
    return paths


class FakeCapture:
    """Stands in for cv2.VideoCapture: yields the given frames, then fails."""

    def __init__(self, frames: List[Optional[np.ndarray]]):
        self.frames = list(frames)
        self.released = False

    def isOpened(self):
        return not self.released

    def read(self):
        if not self.frames:
            return False, None
        frame = self.frames.pop(0)
        if frame is None:
            return False, None
        return True, frame.copy()

    def release(self):
        self.released = True
