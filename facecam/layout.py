"""
Creates the assets layout the pipeline expects:
  assets/haarcascade_frontalface_default.xml
  assets/TrainFace<label>/
Run:
python -m facecam.layout [assets_dir] [label]
"""

from __future__ import annotations
import shutil
import sys
from pathlib import Path
from typing import Optional, Union

from .config import FaceCamConfig
from .detect import BUNDLED_CASCADE, bundled_cascade_path


def init_assets(root: Union[str, Path], label: Optional[str] = None, prefix: str = "TrainFace") -> Path:
    """Returns the training folder. Existing files are left untouched."""
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)

    cascade = root / BUNDLED_CASCADE
    if not cascade.exists():
        shutil.copyfile(bundled_cascade_path(), cascade)

    train_dir = root / f"{prefix}{label or ''}"
    train_dir.mkdir(parents=True, exist_ok=True)
    return train_dir


def main():
    cfg = FaceCamConfig()
    root = Path(sys.argv[1]) if len(sys.argv) > 1 else cfg.assets_dir
    label = sys.argv[2] if len(sys.argv) > 2 else None
    train_dir = init_assets(root, label, prefix=cfg.train_prefix)
    print(f"Assets ready in {root}. Put face *.jpg files in {train_dir}")
    print("Tip: record face crops with `python -m facecam.app --record --only-face`.")


if __name__ == "__main__":
    main()
