import numpy as np

from charsets import DEFAULT_CHAR_SET, get_char_set


class GlyphMapper:
    """Maps 0-255 brightness values onto a fixed glyph ramp.

    The ramp is fixed at construction; index 0 is used for black and the
    last index for white.
    """

    def __init__(self, chars):
        if len(chars) < 2:
            raise ValueError("A glyph ramp needs at least two characters")
        if len(set(chars)) != len(chars):
            raise ValueError(f"Glyph ramp {chars!r} repeats a character")
        if '\n' in chars or '\r' in chars:
            raise ValueError("Glyph ramp must not contain line breaks")
        self.chars = chars
        self._chars_array = np.array(list(chars))

    @classmethod
    def for_char_set(cls, name=DEFAULT_CHAR_SET):
        return cls(get_char_set(name)['chars'])

    def __len__(self):
        return len(self.chars)

    def index(self, brightness):
        last = len(self.chars) - 1
        return min(max(int(brightness) * last // 255, 0), last)

    def map(self, brightness):
        return self.chars[self.index(brightness)]

    def map_array(self, brightness):
        last = len(self.chars) - 1
        indices = np.asarray(brightness, dtype=np.uint32) * last // 255
        indices = np.clip(indices, 0, last)
        return self._chars_array[indices]
