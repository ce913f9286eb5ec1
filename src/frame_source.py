"""Decoded RGB frames pulled from a video through OpenCV."""

import os
from collections import namedtuple

import cv2
import numpy as np

from ascii_errors import DecodeError, InputNotFoundError, VideoStreamError

VideoStream = namedtuple('VideoStream', 'width height fps frame_count')


class RawFrame(namedtuple('RawFrame', 'width height stride data')):
    """One decoded frame: 3 bytes per pixel, RGB, rows ``stride`` bytes apart."""

    __slots__ = ()

    def to_array(self):
        if self.width == 0 or self.height == 0:
            return np.zeros((self.height, self.width, 3), dtype=np.uint8)
        if self.stride < self.width * 3:
            raise ValueError(f"Row stride {self.stride} is too small for width {self.width}")
        # The last row only needs its pixels, not the full stride.
        size = (self.height - 1) * self.stride + self.width * 3
        buffer = np.frombuffer(self.data, dtype=np.uint8)
        if buffer.size < size:
            raise ValueError(f"Frame buffer holds {buffer.size} bytes, {self.width}x{self.height} "
                             f"with stride {self.stride} needs {size}")
        return np.lib.stride_tricks.as_strided(
            buffer, shape=(self.height, self.width, 3), strides=(self.stride, 3, 1), writeable=False)


class OpenCVEngine:
    """Demux/decode capability backed by ``cv2.VideoCapture``.

    OpenCV selects the best video stream when it opens the file. Each
    successful ``grab()`` is treated as one demuxed packet, and its FFmpeg
    backend flushes the decoder itself once the demuxer reaches the end, so
    buffered frames come out of ``packets()`` before it stops.
    """

    def __init__(self, video_path):
        self.video_path = video_path
        self.cap = cv2.VideoCapture(video_path)

    def best_video_stream(self):
        if not self.cap.isOpened():
            raise VideoStreamError(f"Cannot open video file '{self.video_path}'")
        width = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        height = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        if width <= 0 or height <= 0:
            raise VideoStreamError(f"No decodable video stream in '{self.video_path}'")
        fps = self.cap.get(cv2.CAP_PROP_FPS)
        frame_count = max(int(self.cap.get(cv2.CAP_PROP_FRAME_COUNT)), 0)
        return VideoStream(width, height, fps, frame_count)

    def packets(self):
        packet = 0
        while self.cap.grab():
            yield packet
            packet += 1

    def decode(self, packet):
        ret, frame = self.cap.retrieve()
        if not ret or frame is None:
            raise DecodeError(f"Failed to decode frame {packet} of '{self.video_path}'")
        return [frame]

    def flush_and_drain(self):
        return []

    def release(self):
        self.cap.release()


class FrameSource:
    """Lazy, single-pass sequence of RawFrames from one video stream.

    Every yielded RawFrame aliases the same RGB buffer, which is overwritten
    by the next frame. Rasterize a frame before pulling the next one.
    """

    def __init__(self, engine, name=None):
        self.engine = engine
        self.name = name
        self.stream = engine.best_video_stream()
        self._rgb = None
        self._started = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.engine.release()

    def __iter__(self):
        if self._started:
            raise RuntimeError("FrameSource can only be iterated once")
        self._started = True
        return self._frames()

    def _frames(self):
        frame_count = 0
        try:
            for packet in self.engine.packets():
                for frame in self.engine.decode(packet):
                    frame_count += 1
                    yield self._to_raw_frame(frame)
            for frame in self.engine.flush_and_drain():
                frame_count += 1
                yield self._to_raw_frame(frame)
        except cv2.error as e:
            raise DecodeError(f"Failed to decode '{self.name}': {e}") from e
        # OpenCV reports a corrupt or truncated stream as a plain end of stream.
        if frame_count < self.stream.frame_count:
            raise DecodeError(f"Decoding '{self.name}' stopped after {frame_count} of "
                              f"{self.stream.frame_count} frames")

    def _to_raw_frame(self, frame):
        if frame.ndim == 2:
            code = cv2.COLOR_GRAY2RGB
        elif frame.shape[2] == 4:
            code = cv2.COLOR_BGRA2RGB
        else:
            code = cv2.COLOR_BGR2RGB
        height, width = frame.shape[:2]
        if self._rgb is None or self._rgb.shape[:2] != (height, width):
            self._rgb = np.empty((height, width, 3), dtype=np.uint8)
        self._rgb = cv2.cvtColor(frame, code, dst=self._rgb)
        return RawFrame(width, height, self._rgb.strides[0], self._rgb.reshape(-1).data)


def open_video(video_path):
    if not os.path.exists(video_path):
        raise InputNotFoundError(video_path)
    engine = OpenCVEngine(video_path)
    try:
        return FrameSource(engine, name=video_path)
    except VideoStreamError:
        engine.release()
        raise
