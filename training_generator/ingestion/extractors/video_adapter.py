"""Key-frame sampling for video files using OpenCV."""

import base64
import math
import os
import tempfile
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass

import cv2

from training_generator.ingestion.exceptions import ExtractionFailedError, VideoLoadTimeoutError
from training_generator.ingestion.extractors.base import BaseContentExtractor
from training_generator.ingestion.models import UploadedFile, VideoContent, VideoFrame
from training_generator.logging.logger import Log

MIN_FRAMES = 3
MAX_FRAMES = 10
SECONDS_PER_FRAME = 15
MAX_FRAME_WIDTH = 1280
MAX_FRAME_HEIGHT = 720
JPEG_QUALITY = 70
DEFAULT_METADATA_TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class VideoInfo:
    duration: float
    width: int
    height: int


def frame_count_for(duration: float) -> int:
    """Roughly one frame per 15 seconds, clamped to 3..10."""
    return min(MAX_FRAMES, max(MIN_FRAMES, math.ceil(duration / SECONDS_PER_FRAME)))


def sample_timestamps(duration: float) -> list[float]:
    """Evenly spaced offsets that exclude the very start and end."""
    count = frame_count_for(duration)
    step = duration / (count + 1)
    return [step * (i + 1) for i in range(count)]


def fit_within(width: int, height: int) -> tuple[int, int]:
    """Scale dimensions down to fit 1280x720, keeping aspect; never upscale."""
    scale = min(1.0, MAX_FRAME_WIDTH / width, MAX_FRAME_HEIGHT / height)
    return max(1, round(width * scale)), max(1, round(height * scale))


class VideoAdapter(BaseContentExtractor):
    """Captures evenly spaced JPEG stills from a video, one seek at a time."""

    def __init__(self, metadata_timeout_seconds: float = DEFAULT_METADATA_TIMEOUT_SECONDS) -> None:
        self._metadata_timeout_seconds = metadata_timeout_seconds

    def extract(self, file: UploadedFile) -> VideoContent:
        suffix = f".{file.extension}" if file.extension else ".mp4"
        with tempfile.TemporaryDirectory(prefix="training-video-") as tmp_dir:
            path = os.path.join(tmp_dir, f"source{suffix}")
            with open(path, "wb") as handle:
                handle.write(file.data)
            try:
                info = self._load_info(path)
                frames = self._capture_frames(path, info)
            except ExtractionFailedError:
                raise
            except Exception as exc:
                raise ExtractionFailedError(f"opencv video extraction failed: {exc}") from exc

        Log.info(
            f"Captured {len(frames)} frames from '{file.name}' ({info.duration:.1f}s)"
        )
        return VideoContent(
            frames=tuple(frames),
            duration=info.duration,
            text=(
                f'Video: "{file.name}"\n'
                f"Duration: {round(info.duration)} seconds\n"
                f"Key frames extracted: {len(frames)}"
            ),
        )

    def _load_info(self, path: str) -> VideoInfo:
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(_read_video_info, path)
        try:
            return future.result(timeout=self._metadata_timeout_seconds)
        except FutureTimeoutError as exc:
            raise VideoLoadTimeoutError(
                f"Video metadata did not load within {self._metadata_timeout_seconds} seconds"
            ) from exc
        finally:
            executor.shutdown(wait=False)

    def _capture_frames(self, path: str, info: VideoInfo) -> list[VideoFrame]:
        capture = cv2.VideoCapture(path)
        try:
            if not capture.isOpened():
                raise ExtractionFailedError("Failed to load video")
            size = fit_within(info.width, info.height)
            frames: list[VideoFrame] = []
            for timestamp in sample_timestamps(info.duration):
                capture.set(cv2.CAP_PROP_POS_MSEC, timestamp * 1000)
                ok, image = capture.read()
                if not ok or image is None:
                    raise ExtractionFailedError(f"Failed to capture frame at {timestamp:.2f}s")
                if (image.shape[1], image.shape[0]) != size:
                    image = cv2.resize(image, size, interpolation=cv2.INTER_AREA)
                ok, encoded = cv2.imencode(".jpg", image, [cv2.IMWRITE_JPEG_QUALITY, JPEG_QUALITY])
                if not ok:
                    raise ExtractionFailedError(f"Failed to encode frame at {timestamp:.2f}s")
                frames.append(VideoFrame(
                    timestamp=timestamp,
                    image_base64=base64.b64encode(encoded.tobytes()).decode("ascii"),
                ))
            return frames
        finally:
            capture.release()


def _read_video_info(path: str) -> VideoInfo:
    capture = cv2.VideoCapture(path)
    try:
        if not capture.isOpened():
            raise ExtractionFailedError("Failed to load video")
        fps = capture.get(cv2.CAP_PROP_FPS)
        frame_total = capture.get(cv2.CAP_PROP_FRAME_COUNT)
        width = int(capture.get(cv2.CAP_PROP_FRAME_WIDTH))
        height = int(capture.get(cv2.CAP_PROP_FRAME_HEIGHT))
        if fps > 0 and frame_total > 0:
            duration = frame_total / fps
        else:
            duration = _duration_from_end(capture)
    finally:
        capture.release()
    if duration <= 0 or width <= 0 or height <= 0:
        raise ExtractionFailedError("Video has no readable frames or duration")
    return VideoInfo(duration=duration, width=width, height=height)


def _duration_from_end(capture: cv2.VideoCapture) -> float:
    # Streamed WebM/MKV files often carry no frame count.
    if not capture.set(cv2.CAP_PROP_POS_AVI_RATIO, 1):
        return 0.0
    return capture.get(cv2.CAP_PROP_POS_MSEC) / 1000
