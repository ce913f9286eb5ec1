import argparse
import sys

from ascii_converter import DEFAULT_OUTPUT, DEFAULT_WIDTH, video_to_ascii
from ascii_errors import AsciiRenderError
from ascii_player import DEFAULT_FPS, ASCIIVideoPlayer
from charsets import CHAR_SETS, DEFAULT_CHAR_SET
from frame_store import load_frames


def positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog='asciirender',
        description='Convert video to ASCII frames and play them in the terminal')
    parser.add_argument('--convert', metavar='VIDEO', help='Path to the input video file')
    parser.add_argument('--play', metavar='FILE', help='Path to an ASCII frame file to play')
    parser.add_argument('--fps', type=positive_int, default=DEFAULT_FPS,
                        help=f'Playback frame rate (default: {DEFAULT_FPS})')
    parser.add_argument('--width', type=positive_int, default=DEFAULT_WIDTH,
                        help=f'Width of ASCII output in characters (default: {DEFAULT_WIDTH})')
    parser.add_argument('--output', default=DEFAULT_OUTPUT,
                        help=f'Output ASCII frame file path (default: {DEFAULT_OUTPUT})')
    parser.add_argument('-c', '--charset', choices=CHAR_SETS.keys(), default=DEFAULT_CHAR_SET,
                        help=f'Character set to use (default: {DEFAULT_CHAR_SET})')
    parser.add_argument('--loop-playback', action='store_true', help='Repeat playback endlessly')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.convert is None and args.play is None:
        parser.print_help()
        return 1
    try:
        if args.convert is not None:
            video_to_ascii(args.convert, args.output, args.width, args.charset)
            print(f"Video converted and saved to {args.output}")
        if args.play is not None:
            frames = load_frames(args.play)
            width = frames[0].width if frames else 0
            height = frames[0].height if frames else 0
            print(f"Total Frames: {len(frames)}, FPS: {args.fps}, Resolution: {width}x{height}")
            player = ASCIIVideoPlayer(frames, args.fps, args.loop_playback)
            try:
                player.play()
            except KeyboardInterrupt:
                print("\nPlayback stopped.")
    except AsciiRenderError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
