from typing import Optional
import cv2
import numpy as np


def open_camera(index: int = 0) -> cv2.VideoCapture:
    cap = cv2.VideoCapture(index)
    if not cap.isOpened() and index != 0:
        print(f"[camera] Camera {index} not available, trying 0")
        cap.release()
        cap = cv2.VideoCapture(0)
    if not cap.isOpened():
        cap.release()
        raise RuntimeError(f"Camera not opened. Try changing index (0/1/2), got {index}.")
    return cap


def read_frame(cap) -> Optional[np.ndarray]:
    ok, frame = cap.read()
    if not ok or frame is None or frame.size == 0:
        return None
    return frame


def main():
    cap = open_camera(0)
    print("Camera test. Press 'q' to quit.")
    while True:
        frame = read_frame(cap)
        if frame is None:
            print("Failed to read frame.")
            break

        cv2.imshow("Camera Test", frame)
        if (cv2.waitKey(1) & 0xFF) == ord("q"):
            break
    cap.release()
    cv2.destroyAllWindows()


if __name__ == "__main__":
    main()
