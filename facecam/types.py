import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Tuple
import numpy as np


@dataclass(frozen=True)
class FaceRect:
    x: int
    y: int
    w: int
    h: int

    @classmethod
    def empty_rect(cls) -> "FaceRect":
        return cls(0, 0, 0, 0)

    @property
    def empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    @property
    def top_left(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def bottom_right(self) -> Tuple[int, int]:
        return (self.x + self.w, self.y + self.h)

    def offset(self, horizontal: int, vertical: int) -> Tuple[int, int]:
        """Location of the rect shifted by pixels."""
        return (self.x + horizontal, self.y + vertical)

    def crop(self, frame: np.ndarray) -> np.ndarray:
        H, W = frame.shape[:2]
        x1, y1 = max(0, self.x), max(0, self.y)
        x2, y2 = min(W, self.x + self.w), min(H, self.y + self.h)
        return frame[y1:y2, x1:x2]


def format_confidence(value: float) -> str:
    # at most one decimal, no trailing ".0", midpoints rounded away from zero
    if not math.isfinite(value):
        return str(value)
    s = str(Decimal(repr(float(value))).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    if s.endswith(".0"):
        s = s[:-2]
    if s == "-0":
        s = "0"
    return s


@dataclass
class Recognized:
    face_index: int
    confidence_value: float  # LBPH distance, lower is better

    @property
    def confidence(self) -> str:
        return format_confidence(self.confidence_value)
