import os
import time

import cv2
import numpy as np

from ascii_errors import DecodeError
from charsets import DEFAULT_CHAR_SET
from frame_source import open_video
from frame_store import FrameStoreWriter, TextFrame
from glyph_mapper import GlyphMapper

CHAR_ASPECT_RATIO = 0.6
DEFAULT_WIDTH = 80
DEFAULT_OUTPUT = 'output.txt'
PROGRESS_INTERVAL = 100


def ascii_dimensions(video_width, video_height, ascii_width, char_aspect=CHAR_ASPECT_RATIO):
    """Character grid size for a frame, as ``(columns, rows)``.

    The height is truncated once after applying the frame's aspect ratio and
    again after the character-cell correction.
    """
    if ascii_width < 0:
        raise ValueError(f"ASCII width must not be negative, got {ascii_width}")
    if video_width == 0 or video_height == 0:
        return 0, 0
    aspect_ratio = video_height / video_width
    target_height = int(ascii_width * aspect_ratio)
    adjusted_height = int(target_height * char_aspect)
    return ascii_width, adjusted_height


def rasterize_frame(frame, ascii_width, mapper, char_aspect=CHAR_ASPECT_RATIO):
    width, height = ascii_dimensions(frame.width, frame.height, ascii_width, char_aspect)
    if width == 0 or height == 0:
        return TextFrame(())
    pixels = np.ascontiguousarray(frame.to_array())
    resized = cv2.resize(pixels, (width, height), interpolation=cv2.INTER_NEAREST_EXACT)
    brightness = resized.astype(np.uint16).sum(axis=2) // 3
    ascii_frame = mapper.map_array(brightness)
    return TextFrame(''.join(row) for row in ascii_frame)


def convert_frames(frames, writer, ascii_width, mapper, total_frames=0, verbose=False):
    frame_count = 0
    for frame in frames:
        writer.append(rasterize_frame(frame, ascii_width, mapper))
        frame_count += 1
        if verbose and frame_count % PROGRESS_INTERVAL == 0:
            print(f"Processed {frame_count}/{total_frames} frames")
    return frame_count


def video_to_ascii(video_path, output_path=DEFAULT_OUTPUT, ascii_width=DEFAULT_WIDTH,
                   char_set_name=DEFAULT_CHAR_SET, verbose=True):
    start_time = time.time()
    mapper = GlyphMapper.for_char_set(char_set_name)
    with open_video(video_path) as source:
        stream = source.stream
        if verbose:
            calc_width, calc_height = ascii_dimensions(stream.width, stream.height, ascii_width)
            print(f"Using ASCII width: {calc_width}, calculated height: {calc_height}")
            print(f"Output file: {output_path}")
            print(f"Video FPS: {stream.fps:.2f}, Total Frames: {stream.frame_count}")
        try:
            with FrameStoreWriter(output_path) as writer:
                frame_count = convert_frames(source, writer, ascii_width, mapper,
                                             stream.frame_count, verbose)
        except DecodeError:
            if os.path.exists(output_path):
                os.remove(output_path)
            raise
    if verbose:
        total_time = time.time() - start_time
        file_size = os.path.getsize(output_path) / (1024 * 1024)
        print(f"\n=== Conversion Statistics ===")
        print(f"Total time: {total_time:.2f} seconds")
        print(f"Frames processed: {frame_count}")
        print(f"Output file size: {file_size:.2f} MB")
        if total_time > 0:
            print(f"Processing speed: {frame_count/total_time:.1f} frames/second")
    return frame_count
