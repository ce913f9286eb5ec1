"""Line-oriented store for ASCII frames.

Every frame is written as a ``FRAME_START`` marker line, its rows, and a blank
separator line. The file carries no header, so playback order is file order
and timing comes from the fps chosen at playback.
"""

from collections import namedtuple

from ascii_errors import InputNotFoundError, StoreReadError, StoreWriteError

FRAME_MARKER = 'FRAME_START'


class TextFrame(namedtuple('TextFrame', 'rows')):
    __slots__ = ()

    def __new__(cls, rows):
        return super().__new__(cls, tuple(rows))

    @property
    def width(self):
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self):
        return len(self.rows)

    @property
    def text(self):
        return ''.join(row + '\n' for row in self.rows)


def append_frame(frame, sink):
    try:
        sink.write(f"{FRAME_MARKER}\n{frame.text}\n")
    except OSError as e:
        raise StoreWriteError(f"Could not write frame: {e}") from e


class FrameStoreWriter:
    def __init__(self, path):
        self.path = path
        self.frames_written = 0
        self._file = None

    def __enter__(self):
        try:
            self._file = open(self.path, "w", encoding='utf-8', newline='\n')
        except OSError as e:
            raise StoreWriteError(f"Cannot open '{self.path}' for writing: {e}") from e
        return self

    def append(self, frame):
        append_frame(frame, self._file)
        self.frames_written += 1

    def __exit__(self, exc_type, exc, tb):
        try:
            self._file.close()
        except OSError as e:
            if exc is None:
                raise StoreWriteError(f"Could not finish writing '{self.path}': {e}") from e
        finally:
            self._file = None


def parse_frames(lines):
    """Fold store lines into completed frames.

    A marker closes the frame being collected, blank lines only separate
    frames, and an unterminated frame at the end of input is kept as long as
    it has rows.
    """
    frames = []
    rows = []
    for line in lines:
        line = line.rstrip('\r\n')
        if line == FRAME_MARKER:
            if rows:
                frames.append(TextFrame(rows))
                rows = []
        elif line:
            rows.append(line)
    if rows:
        frames.append(TextFrame(rows))
    return frames


def load_frames(path):
    try:
        with open(path, "r", encoding='utf-8') as f:
            return parse_frames(f)
    except FileNotFoundError as e:
        raise InputNotFoundError(path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise StoreReadError(f"Cannot read ASCII store '{path}': {e}") from e
