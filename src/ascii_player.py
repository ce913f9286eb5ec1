import contextlib
import enum
import sys
import time

from ascii_errors import FrameShapeError, TerminalWriteError

DEFAULT_FPS = 24

CLEAR_SCREEN = "\033[2J\033[H"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"


class PlayerState(enum.Enum):
    IDLE = 'idle'
    PLAYING = 'playing'
    STOPPED = 'stopped'


class ASCIIVideoPlayer:
    """Redraws stored frames in the terminal at a fixed frame rate.

    Pacing is measure-then-sleep per frame: a frame that takes longer than
    ``1 / fps`` to draw is followed immediately by the next one, and nothing
    is dropped. Drift from slow frames is not made up later.
    """

    def __init__(self, frames, fps=DEFAULT_FPS, repeat=False, stream=None,
                 clock=time.monotonic, sleep=time.sleep):
        if isinstance(fps, bool) or not isinstance(fps, int) or fps <= 0:
            raise ValueError(f"fps must be a positive integer, got {fps!r}")
        self.frames = list(frames)
        self.fps = fps
        self.repeat = repeat
        self.stream = stream if stream is not None else sys.stdout
        self.clock = clock
        self.sleep = sleep
        self.frame_duration = 1.0 / fps
        self.state = PlayerState.IDLE
        self.frames_rendered = 0

    def _write(self, text):
        try:
            self.stream.write(text)
        except (OSError, ValueError) as e:
            raise TerminalWriteError(f"Could not write to terminal: {e}") from e

    def _flush(self):
        try:
            self.stream.flush()
        except (OSError, ValueError) as e:
            raise TerminalWriteError(f"Could not write to terminal: {e}") from e

    def _check_shape(self, frame_index, frame):
        width, height = self.frames[0].width, self.frames[0].height
        if frame.height != height or any(len(row) != width for row in frame.rows):
            raise FrameShapeError(
                f"Frame {frame_index} does not match the {width}x{height} geometry of the first frame")

    def render(self, frame):
        self._write(CLEAR_SCREEN)
        self._flush()
        self._write(frame.text)
        self._flush()
        self.frames_rendered += 1

    def play(self):
        if not self.frames:
            self.state = PlayerState.STOPPED
            return
        self.state = PlayerState.PLAYING
        try:
            self._write(HIDE_CURSOR)
            while True:
                for frame_index, frame in enumerate(self.frames):
                    self._check_shape(frame_index, frame)
                    start_time = self.clock()
                    self.render(frame)
                    elapsed_time = self.clock() - start_time
                    if elapsed_time < self.frame_duration:
                        self.sleep(self.frame_duration - elapsed_time)
                if not self.repeat:
                    break
        finally:
            self.state = PlayerState.STOPPED
            # The terminal may be the thing that failed.
            with contextlib.suppress(OSError, ValueError):
                self.stream.write(SHOW_CURSOR)
                self.stream.flush()

