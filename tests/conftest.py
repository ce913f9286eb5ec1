"""
Test Configuration
==================

Shared fixtures: solid-colour frames, a scripted decoding engine and a fake
clock for the player.
"""

import cv2
import numpy as np
import pytest

from frame_source import RawFrame, VideoStream


def make_raw_frame(width, height, rgb=(255, 255, 255), padding=0):
    stride = width * 3 + padding
    row = bytes(rgb) * width + b'\x00' * padding
    return RawFrame(width, height, stride, row * height)


def bgr_frame(width, height, value=255):
    return np.full((height, width, 3), value, dtype=np.uint8)


class FakeEngine:
    """Engine stand-in that buffers frames like a real decoder.

    ``packets`` maps each packet to the frames it releases; ``tail`` is what
    the decoder still holds when the input ends. ``frame_count`` overrides
    the count the stream header announces.
    """

    def __init__(self, width, height, packets=(), tail=(), fail_on=None, frame_count=None):
        if frame_count is None:
            frame_count = sum(len(p) for p in packets) + len(tail)
        self.stream = VideoStream(width, height, 25.0, frame_count)
        self._packets = list(packets)
        self._tail = list(tail)
        self.fail_on = fail_on
        self.decoded = []
        self.flushed = False
        self.released = False

    def best_video_stream(self):
        return self.stream

    def packets(self):
        return iter(range(len(self._packets)))

    def decode(self, packet):
        if packet == self.fail_on:
            raise cv2.error("corrupt packet")
        self.decoded.append(packet)
        return list(self._packets[packet])

    def flush_and_drain(self):
        self.flushed = True
        return list(self._tail)

    def release(self):
        self.released = True


class FakeClock:
    def __init__(self, render_cost=0.0):
        self.now = 0.0
        self.render_cost = render_cost
        self.sleeps = []
        self._calls = 0

    def clock(self):
        # Every second reading is taken after a render.
        self._calls += 1
        if self._calls % 2 == 0:
            self.now += self.render_cost
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def white_frame():
    return make_raw_frame(4, 4)


@pytest.fixture
def fake_clock():
    return FakeClock()
