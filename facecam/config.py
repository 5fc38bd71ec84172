"""
Runtime configuration for the webcam face pipeline.

Defaults mirror a typical layout:
- assets/haarcascade_frontalface_default.xml
- assets/TrainFace<label>/*.jpg
- assets/<session id>/*.jpg (exports, only when recording)
"""

from __future__ import annotations
import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

ESCAPE_KEY = 27


@dataclass
class FaceCamConfig:
    assets_dir: Path = Path("assets")
    cascade_file: str = "haarcascade_frontalface_default.xml"

    # training
    train_prefix: str = "TrainFace"
    default_label: str = "Face #1"
    train_label: int = 1
    model_path: Optional[Path] = None

    # recognition: accepted when LBPH confidence < max_confidence
    max_confidence: float = 80.0
    recognize_size: Tuple[int, int] = (256, 256)

    # detection
    scale_factor: float = 1.1
    min_neighbors: int = 2

    # export
    is_recording: bool = False
    is_record_only_face: bool = False

    # capture / UI
    camera_index: int = 0
    window_name: str = "facecam"
    quit_key: int = ESCAPE_KEY

    debug: bool = False

    def cascade_path(self) -> Path:
        return self.assets_dir / self.cascade_file

    @classmethod
    def from_args(cls, argv: Optional[List[str]] = None) -> "FaceCamConfig":
        parser = argparse.ArgumentParser(description="Webcam face detection and LBPH recognition")
        parser.add_argument("--assets", type=Path, default=cls.assets_dir,
                            help="Folder holding the cascade XML and the training folder")
        parser.add_argument("--camera", type=int, default=cls.camera_index,
                            help="Camera index (falls back to 0)")
        parser.add_argument("--record", action="store_true",
                            help="Export every frame as JPEG into a session folder")
        parser.add_argument("--only-face", action="store_true",
                            help="Export only the face crop (dataset building), implies --record")
        parser.add_argument("--train-prefix", type=str, default=cls.train_prefix,
                            help="Name prefix of the training folder")
        parser.add_argument("--max-confidence", type=float, default=cls.max_confidence,
                            help="LBPH confidence below which a face counts as recognized")
        parser.add_argument("--model", type=Path, default=None,
                            help="Cache the trained LBPH model at this path")
        parser.add_argument("--window", type=str, default=cls.window_name)
        parser.add_argument("--debug", action="store_true")
        args = parser.parse_args(argv)

        return cls(
            assets_dir=args.assets,
            camera_index=args.camera,
            is_recording=args.record or args.only_face,
            is_record_only_face=args.only_face,
            train_prefix=args.train_prefix,
            max_confidence=args.max_confidence,
            model_path=args.model,
            window_name=args.window,
            debug=args.debug,
        )
