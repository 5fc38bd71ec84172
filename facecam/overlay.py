from typing import Tuple
import cv2
import numpy as np

from .types import FaceRect

RECT_COLOR: Tuple[int, int, int] = (250, 0, 0)
RECT_THICKNESS = 2
LABEL_COLOR: Tuple[int, int, int] = (255, 0, 0)  # blue (BGR)
LABEL_FONT = cv2.FONT_HERSHEY_PLAIN
LABEL_SCALE = 4


def draw_face_rect(frame: np.ndarray, rect: FaceRect) -> np.ndarray:
    cv2.rectangle(frame, rect.top_left, rect.bottom_right, RECT_COLOR, RECT_THICKNESS)
    return frame


def draw_label(frame: np.ndarray, rect: FaceRect, label: str) -> np.ndarray:
    """Writes label just above the rect. Drawn twice, 1px apart, for weight."""
    cv2.putText(frame, label, rect.offset(0, -5), LABEL_FONT, LABEL_SCALE, LABEL_COLOR)
    cv2.putText(frame, label, rect.offset(1, -6), LABEL_FONT, LABEL_SCALE, LABEL_COLOR)
    return frame
