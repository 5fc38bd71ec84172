"""
Haar cascade face detection.
Only the first face found is used by the pipeline; detect() still returns
every face in detector order.
Run:
python -m facecam.detect
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Union
import cv2
import numpy as np

from .types import FaceRect
from .overlay import draw_face_rect

BUNDLED_CASCADE = "haarcascade_frontalface_default.xml"


def bundled_cascade_path() -> str:
    return cv2.data.haarcascades + BUNDLED_CASCADE


class HaarFaceDetector:
    def __init__(
        self,
        haar_xml: Optional[Union[str, Path]] = None,
        scale_factor: float = 1.1,
        min_neighbors: int = 2,
        debug: bool = False,
    ):
        self.debug = bool(debug)
        self.scale_factor = float(scale_factor)
        self.min_neighbors = int(min_neighbors)

        if haar_xml is None or not Path(haar_xml).is_file():
            if self.debug and haar_xml is not None:
                print(f"[detect] {haar_xml} not found, using bundled cascade")
            haar_xml = bundled_cascade_path()

        self.haar_xml = str(haar_xml)
        self.face_cascade = cv2.CascadeClassifier(self.haar_xml)
        if self.face_cascade.empty():
            raise RuntimeError(f"Failed to load Haar cascade: {self.haar_xml}")

    def detect(self, frame_bgr: np.ndarray) -> List[FaceRect]:
        faces = self.face_cascade.detectMultiScale(
            frame_bgr,
            scaleFactor=self.scale_factor,
            minNeighbors=self.min_neighbors,
            flags=cv2.CASCADE_SCALE_IMAGE,
        )
        if faces is None or len(faces) == 0:
            return []

        # faces are (x,y,w,h)
        return [FaceRect(int(x), int(y), int(w), int(h)) for (x, y, w, h) in faces]

    def first_face(self, frame_bgr: np.ndarray) -> FaceRect:
        faces = self.detect(frame_bgr)
        if not faces:
            return FaceRect.empty_rect()
        return faces[0]


def main():
    from .camera import open_camera, read_frame

    det = HaarFaceDetector(debug=True)
    cap = open_camera(0)
    print("Haar face detect. Press 'q' to quit.")
    while True:
        frame = read_frame(cap)
        if frame is None:
            break

        face = det.first_face(frame)
        if not face.empty:
            draw_face_rect(frame, face)

        cv2.imshow("Face Detection", frame)
        if (cv2.waitKey(1) & 0xFF) == ord("q"):
            break

    cap.release()
    cv2.destroyAllWindows()


if __name__ == "__main__":
    main()
