import io

import pytest

from ascii_errors import InputNotFoundError, StoreReadError, StoreWriteError
from frame_store import FRAME_MARKER, FrameStoreWriter, TextFrame, append_frame, load_frames, parse_frames


FRAMES = [
    TextFrame(["@@%%", "#*+=", "    "]),
    TextFrame(["-:. ", ". :-", "@@@@"]),
    TextFrame([" .  ", "    ", "%%%%"]),
]


class FailingSink:
    def write(self, text):
        raise OSError("disk full")


class TestTextFrame:

    def test_geometry_and_text(self):
        frame = FRAMES[0]
        assert (frame.width, frame.height) == (4, 3)
        assert frame.text == "@@%%\n#*+=\n    \n"

    def test_empty(self):
        assert (TextFrame(()).width, TextFrame(()).height, TextFrame(()).text) == (0, 0, "")


class TestWrite:

    def test_append_frame_layout(self):
        sink = io.StringIO()
        append_frame(TextFrame(["ab", "cd"]), sink)
        assert sink.getvalue() == "FRAME_START\nab\ncd\n\n"

    def test_append_failure(self):
        with pytest.raises(StoreWriteError, match="disk full"):
            append_frame(FRAMES[0], FailingSink())

    def test_writer_counts_frames(self, tmp_path):
        with FrameStoreWriter(tmp_path / "store.txt") as writer:
            for frame in FRAMES:
                writer.append(frame)
        assert writer.frames_written == 3
        assert (tmp_path / "store.txt").read_text(encoding='utf-8').count(FRAME_MARKER) == 3

    def test_writer_unwritable_path(self, tmp_path):
        with pytest.raises(StoreWriteError):
            with FrameStoreWriter(tmp_path / "no-such-dir" / "store.txt"):
                pass


class TestParse:

    def test_round_trip(self, tmp_path):
        path = tmp_path / "store.txt"
        with FrameStoreWriter(path) as writer:
            for frame in FRAMES:
                writer.append(frame)
        assert load_frames(path) == FRAMES

    def test_load_is_repeatable(self, tmp_path):
        path = tmp_path / "store.txt"
        with FrameStoreWriter(path) as writer:
            for frame in FRAMES:
                writer.append(frame)
        assert load_frames(path) == load_frames(path)

    def test_empty_input(self):
        assert parse_frames([]) == []

    def test_trailing_marker_dropped(self):
        lines = ["FRAME_START\n", "ab\n", "\n", "FRAME_START\n"]
        assert parse_frames(lines) == [TextFrame(["ab"])]

    def test_missing_separator_and_stray_blank_lines(self):
        lines = ["\n", "FRAME_START\n", "ab\n", "\n", "\n", "cd\n", "FRAME_START\n", "ef"]
        assert parse_frames(lines) == [TextFrame(["ab", "cd"]), TextFrame(["ef"])]

    def test_rows_before_first_marker(self):
        assert parse_frames(["xy\n", "FRAME_START\n", "zw\n"]) == [TextFrame(["xy"]), TextFrame(["zw"])]

    def test_crlf_line_endings(self):
        assert parse_frames(["FRAME_START\r\n", "ab\r\n"]) == [TextFrame(["ab"])]

    def test_all_space_rows_are_kept(self):
        assert parse_frames(["FRAME_START\n", "   \n", "\n"]) == [TextFrame(["   "])]


class TestLoad:

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputNotFoundError):
            load_frames(tmp_path / "missing.txt")

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "store.txt"
        path.write_bytes(b"FRAME_START\n\xff\xfe\x80\n")
        with pytest.raises(StoreReadError):
            load_frames(path)

    def test_directory(self, tmp_path):
        with pytest.raises(StoreReadError):
            load_frames(tmp_path)
