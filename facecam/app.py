"""
Live webcam face pipeline:
camera -> Haar detection (first face) -> rectangle
-> LBPH recognition (trained lazily from assets/TrainFace*) -> label
-> display, and JPEG export when recording.

Run:
python -m facecam.app [--record] [--only-face] [--assets assets]

Keys:
Esc / q : quit
"""

from __future__ import annotations
from typing import List, Optional
import cv2
import numpy as np

from .camera import open_camera, read_frame
from .config import FaceCamConfig
from .detect import HaarFaceDetector
from .exporter import SessionExporter
from .overlay import draw_face_rect, draw_label
from .recognizer import FaceRecognizer
from .types import FaceRect, Recognized


class FaceCamApp:
    def __init__(
        self,
        cfg: Optional[FaceCamConfig] = None,
        capture=None,
        detector: Optional[HaarFaceDetector] = None,
        recognizer: Optional[FaceRecognizer] = None,
        exporter: Optional[SessionExporter] = None,
        show: bool = True,
    ):
        self.cfg = cfg or FaceCamConfig()
        self.cap = capture
        self.detector = detector
        self.recognizer = recognizer or FaceRecognizer.from_config(self.cfg)
        self.exporter = exporter
        self.show = bool(show)

        self.first_face = FaceRect.empty_rect()
        self.last_recognized: Optional[Recognized] = None
        self.frames = 0

    # -------------------------
    # Lifecycle
    # -------------------------

    def start(self) -> None:
        if self.cap is None:
            self.cap = open_camera(self.cfg.camera_index)

        if self.detector is None:
            self.detector = HaarFaceDetector(
                haar_xml=self.cfg.cascade_path(),
                scale_factor=self.cfg.scale_factor,
                min_neighbors=self.cfg.min_neighbors,
                debug=self.cfg.debug,
            )

        if self.cfg.is_record_only_face and not self.cfg.is_recording:
            print("[export] face-only export is set but recording is off, nothing will be saved")
        if self.cfg.is_recording:
            if self.exporter is None:
                self.exporter = SessionExporter(self.cfg.assets_dir)
            self.exporter.start()

    def update(self) -> Optional[np.ndarray]:
        frame = read_frame(self.cap)
        if frame is None:
            return None
        self.frames += 1

        # detection
        self.first_face = self.detector.first_face(frame)
        face_img = None if self.first_face.empty else self.first_face.crop(frame).copy()

        # recognition
        if face_img is not None:
            draw_face_rect(frame, self.first_face)
            self._add_face_label(frame, face_img)
        elif self.cfg.debug:
            print(f"[detect] frame {self.frames}: no face")

        if self.show:
            cv2.imshow(self.cfg.window_name, frame)

        # export
        if self.cfg.is_recording:
            if self.cfg.is_record_only_face:
                if face_img is not None:
                    self.exporter.export(face_img)
            else:
                self.exporter.export(frame)

        return frame

    def _add_face_label(self, frame: np.ndarray, face_img: np.ndarray) -> None:
        recognized = self.recognizer.recognize(face_img)
        self.last_recognized = recognized
        label = self.recognizer.label_for(recognized)
        print(f"[recognize] {recognized.face_index} ({recognized.confidence})")
        draw_label(frame, self.first_face, label)

    def should_quit(self, key: int) -> bool:
        return key in (self.cfg.quit_key, ord("q"))

    def stop(self) -> None:
        if self.cap is not None:
            self.cap.release()
        if self.show:
            cv2.destroyAllWindows()
        if self.exporter is not None and self.exporter.count:
            print(f"[export] {self.exporter.count} images saved to {self.exporter.session_folder}")

    def run(self) -> None:
        try:
            self.start()
            print("Face recognition running. Press Esc or q to quit.")
            while True:
                frame = self.update()
                if frame is None:
                    print("[camera] Failed to read frame.")
                    break
                key = cv2.waitKey(1) & 0xFF
                if self.should_quit(key):
                    break
        finally:
            self.stop()


def main(argv: Optional[List[str]] = None):
    cfg = FaceCamConfig.from_args(argv)
    FaceCamApp(cfg).run()


if __name__ == "__main__":
    main()
