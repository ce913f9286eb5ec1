"""Error kinds raised by the conversion pipeline and the player."""


class AsciiRenderError(Exception):
    pass


class InputNotFoundError(AsciiRenderError):
    def __init__(self, path):
        super().__init__(f"File '{path}' not found")
        self.path = path


class VideoStreamError(AsciiRenderError):
    """The input has no video stream OpenCV can decode."""


class DecodeError(AsciiRenderError):
    pass


class StoreWriteError(AsciiRenderError):
    pass


class StoreReadError(AsciiRenderError):
    pass


class TerminalWriteError(AsciiRenderError):
    pass


class FrameShapeError(AsciiRenderError):
    """A stored frame does not match the geometry of the first frame."""
