"""Animated GIF output for trajectory frames."""

import numpy as np
from typing import List, Optional


def _to_rgb8(frame: np.ndarray) -> np.ndarray:
    frame = np.asarray(frame)
    if frame.ndim != 3 or frame.shape[2] not in (3, 4):
        raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) image, got shape {frame.shape}")
    frame = frame[:, :, :3]
    if frame.dtype != np.uint8:
        frame = (np.clip(frame, 0.0, 1.0) * 255).astype(np.uint8)
    return np.array(frame, copy=True)


class GIFExporter:
    """Collects frames from a renderer and writes them as one looping GIF.

    Frames are copied on arrival, so a renderer may reuse its buffer. Every
    frame must have the size of the first one.
    """

    def __init__(self, output_path: str, fps: int = 10, duration: Optional[float] = None):
        """
        Args:
            output_path: Output file path (.gif)
            fps: Playback rate, ignored when duration is given
            duration: Seconds per frame
        """
        if duration is None and fps <= 0:
            raise ValueError(f"fps must be > 0, got {fps}")
        self.output_path = output_path
        self.duration = duration if duration is not None else 1.0 / fps
        self.frames: List[np.ndarray] = []

    def add_frame(self, frame: np.ndarray):
        """Queue one image; float images are read as [0, 1] intensities."""
        frame = _to_rgb8(frame)
        if self.frames and frame.shape != self.frames[0].shape:
            raise ValueError(f"Frame shape {frame.shape} differs from first frame {self.frames[0].shape}")
        self.frames.append(frame)

    def capture(self, renderer, system):
        """Render the system and queue the resulting frame."""
        renderer.render(system)
        self.add_frame(renderer.capture_frame())

    def __len__(self) -> int:
        return len(self.frames)

    def clear(self):
        self.frames = []

    def export(self):
        """Write all queued frames to ``output_path``."""
        if not self.frames:
            raise ValueError("No frames to export")

        try:
            import imageio
        except ImportError:
            raise ImportError("GIF export requires imageio. Install with: pip install imageio")

        imageio.mimsave(self.output_path, self.frames, duration=self.duration, loop=0)
