"""
Shared pytest fixtures for facecam tests.
"""
from pathlib import Path

import numpy as np
import pytest

from facecam.config import FaceCamConfig
from tests.helpers import write_jpgs


@pytest.fixture
def assets(tmp_path) -> Path:
    """assets/ with a TrainFaceAlice folder of three training images."""
    root = tmp_path / "assets"
    write_jpgs(root / "TrainFaceAlice", [1, 2, 3])
    return root


@pytest.fixture
def cfg(assets) -> FaceCamConfig:
    return FaceCamConfig(assets_dir=assets)


@pytest.fixture
def bgr_frame() -> np.ndarray:
    frame = np.zeros((240, 320, 3), dtype=np.uint8)
    frame[:] = (40, 80, 120)
    return frame
