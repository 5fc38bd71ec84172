"""
LBPH face recognition trained from a folder of JPEGs.

Training data layout (searched recursively under the assets folder):
  <assets>/**/TrainFace<label>/*.jpg
The folder name minus the prefix becomes the face label ("TrainFaceAlice"
-> "Alice"). A bare "TrainFace" folder uses the default label.

The model is trained lazily, on the first recognition. When a model path is
given the trained model is written there (OpenCV YAML + JSON sidecar) and
loaded on the next run instead of retraining.
"""

from __future__ import annotations
import json
import time
from pathlib import Path
from typing import List, Optional, Tuple, Union
import cv2
import numpy as np

from .config import FaceCamConfig
from .types import Recognized

UNKNOWN_LABEL = "Unknown face"


# -------------------------
# Training data
# -------------------------

def find_training_folder(root: Union[str, Path], prefix: str) -> Path:
    root = Path(root)
    candidates: List[Path] = []
    if root.is_dir():
        candidates = [p for p in root.rglob(f"{prefix}*") if p.is_dir() and p.name.startswith(prefix)]
    if not candidates:
        raise FileNotFoundError(
            f"For training the face model recognition a folder starting with {prefix} must exist in {root}"
        )
    # shallowest first, then by path
    candidates.sort(key=lambda p: (len(p.relative_to(root).parts), str(p)))
    return candidates[0]


def parse_face_label(folder: Union[str, Path], prefix: str, default: str) -> str:
    label = Path(folder).name[len(prefix):]
    if not label.strip():
        return default
    return label


def load_gray_image(path: Union[str, Path]) -> Optional[np.ndarray]:
    path = Path(path)
    if not path.is_file():
        return None
    return cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)


def list_training_images(folder: Union[str, Path]) -> List[Path]:
    return sorted(p for p in Path(folder).glob("*.jpg") if p.is_file())


def train_on_folder(folder: Union[str, Path], label: int = 1, debug: bool = False) -> Tuple[cv2.face.LBPHFaceRecognizer, int]:
    """
    Trains a new LBPH model on every readable *.jpg in folder, all tagged
    with the same label. Returns (model, number of images used).
    """
    training_set: List[np.ndarray] = []
    for p in list_training_images(folder):
        img = load_gray_image(p)
        if img is None or img.size == 0:
            print(f"[train] skipping unreadable image: {p}")
            continue
        training_set.append(img)

    if not training_set:
        raise RuntimeError(f"No readable *.jpg training images in {folder}")

    model = cv2.face.LBPHFaceRecognizer_create()
    model.train(training_set, np.full(len(training_set), label, dtype=np.int32))
    if debug:
        print(f"[train] trained on {len(training_set)} images from {folder}")
    return model, len(training_set)


# -------------------------
# Recognizer
# -------------------------

class FaceRecognizer:
    def __init__(
        self,
        assets_dir: Union[str, Path],
        train_prefix: str = "TrainFace",
        default_label: str = "Face #1",
        train_label: int = 1,
        max_confidence: float = 80.0,
        recognize_size: Tuple[int, int] = (256, 256),
        model_path: Optional[Union[str, Path]] = None,
        debug: bool = False,
    ):
        self.assets_dir = Path(assets_dir)
        self.train_prefix = train_prefix
        self.face_label = default_label
        self.train_label = int(train_label)
        self.max_confidence = float(max_confidence)
        self.in_w, self.in_h = int(recognize_size[0]), int(recognize_size[1])
        self.model_path = Path(model_path) if model_path is not None else None
        self.debug = bool(debug)
        self._model: Optional[cv2.face.LBPHFaceRecognizer] = None
        self._folder: Optional[Path] = None
        self._num_images = 0

    @classmethod
    def from_config(cls, cfg: FaceCamConfig) -> "FaceRecognizer":
        return cls(
            assets_dir=cfg.assets_dir,
            train_prefix=cfg.train_prefix,
            default_label=cfg.default_label,
            train_label=cfg.train_label,
            max_confidence=cfg.max_confidence,
            recognize_size=cfg.recognize_size,
            model_path=cfg.model_path,
            debug=cfg.debug,
        )

    @property
    def is_trained(self) -> bool:
        return self._model is not None

    @property
    def model(self) -> cv2.face.LBPHFaceRecognizer:
        if self._model is None:
            if self.model_path is not None and self.model_path.is_file():
                self.load_model(self.model_path)
            else:
                self.train()
                if self.model_path is not None:
                    self.save_model(self.model_path)
        return self._model

    def train(self) -> None:
        folder = find_training_folder(self.assets_dir, self.train_prefix)
        self.face_label = parse_face_label(folder, self.train_prefix, self.face_label)
        self._model, self._num_images = train_on_folder(folder, self.train_label, debug=self.debug)
        self._folder = folder
        print(f"[train] '{self.face_label}' trained on {self._num_images} images")

    # -------------------------
    # Model cache
    # -------------------------

    @staticmethod
    def _meta_path(path: Path) -> Path:
        return path.with_name(path.name + ".json")

    def save_model(self, path: Union[str, Path]) -> None:
        if self._model is None:
            raise RuntimeError("No trained model to save")
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._model.write(str(path))
        meta = {
            "label": self.face_label,
            "train_label": self.train_label,
            "folder": str(self._folder) if self._folder is not None else "",
            "num_images": self._num_images,
            "trained_at": time.strftime("%Y-%m-%d %H:%M:%S"),
        }
        self._meta_path(path).write_text(json.dumps(meta, indent=2), encoding="utf-8")

    def load_model(self, path: Union[str, Path]) -> None:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"LBPH model not found: {path}")
        model = cv2.face.LBPHFaceRecognizer_create()
        model.read(str(path))

        meta_path = self._meta_path(path)
        if meta_path.is_file():
            meta = json.loads(meta_path.read_text(encoding="utf-8"))
            self.face_label = meta.get("label", self.face_label)
            self.train_label = int(meta.get("train_label", self.train_label))
            self._num_images = int(meta.get("num_images", 0))
        self._model = model
        print(f"[train] loaded model for '{self.face_label}' from {path}")

    # -------------------------
    # Prediction
    # -------------------------

    def _preprocess(self, face_bgr: np.ndarray) -> np.ndarray:
        small = cv2.resize(face_bgr, (self.in_w, self.in_h), interpolation=cv2.INTER_LINEAR)
        if small.ndim == 3:
            small = cv2.cvtColor(small, cv2.COLOR_BGR2GRAY)
        return small

    def recognize(self, face_bgr: np.ndarray) -> Recognized:
        gray = self._preprocess(face_bgr)
        face_index, confidence = self.model.predict(gray)
        return Recognized(face_index=int(face_index), confidence_value=float(confidence))

    def is_match(self, recognized: Recognized) -> bool:
        return recognized.confidence_value < self.max_confidence

    def label_for(self, recognized: Recognized) -> str:
        if self.is_match(recognized):
            return f"{self.face_label} {recognized.confidence}"
        return UNKNOWN_LABEL
