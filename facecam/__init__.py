"""
Webcam Face Recognition with Haar Cascade and LBPH

This package implements a small webcam face pipeline:
- Face detection using Haar Cascade
- Face recognition using an LBPH model trained from a folder of JPEGs
- Bounding box and label overlay on the live frame
- Optional JPEG export of frames for dataset building
"""

__version__ = "1.0.0"
