"""
Command-line interface for the video trimmer
"""
import argparse
import logging
import sys
from typing import Callable, Optional, Tuple

from .config import Config, ConfigError
from .notifier import ConsoleNotifier, Notifier, NullNotifier
from .core import (
    VideoInfo,
    format_duration_description,
    format_time_display,
    format_time_input,
    is_valid_time_input,
    parse_time_input,
    safe_parse_time_input,
    validate_time_range,
)
from .services.errors import TrimmerError, ValidationError
from .services.probe import check_ffmpeg_installed, get_video_info
from .services.export import cut_video

TIME_FORMATS_HINT = "SS, MM:SS or HH:MM:SS"


def print_video_info(info: VideoInfo, show_milliseconds: bool = False) -> None:
    print(f"\n{'='*60}")
    print(f"Duration:   {format_time_display(info.duration, show_milliseconds)}")
    print(f"Resolution: {info.width}x{info.height}")
    print(f"Frame rate: {info.fps:.2f} fps")
    print(f"Codec:      {info.codec}")
    print(f"Format:     {info.format}")
    print(f"{'='*60}")


def read_time(label: str, text: Optional[str], default: float,
              notifier: Notifier, input_fn: Optional[Callable[[str], str]] = None) -> float:
    """Return the time given on the command line, or ask for it.

    A value passed as ``text`` must parse, otherwise ``ValidationError`` is
    raised. At the prompt an empty answer keeps ``default`` and invalid
    answers are reported through ``notifier`` and asked again.
    """
    if text is not None:
        if not is_valid_time_input(text):
            raise ValidationError(f"Invalid {label.lower()} time '{text}', use {TIME_FORMATS_HINT}")
        return safe_parse_time_input(text)

    input_fn = input_fn or input
    while True:
        raw = input_fn(f"{label} time ({TIME_FORMATS_HINT}) [{format_time_input(default)}]: ").strip()
        if not raw:
            return default
        value = parse_time_input(raw)
        if value is not None:
            return value
        notifier.notify(f"Invalid time '{raw}', use {TIME_FORMATS_HINT}")


def choose_range(start_text: Optional[str], end_text: Optional[str], duration: float,
                 notifier: Optional[Notifier] = None,
                 input_fn: Optional[Callable[[str], str]] = None) -> Tuple[float, float]:
    """Resolve a valid ``(start, end)`` pair for a clip of ``duration`` seconds.

    When both ends come from the command line an invalid range raises
    ``ValidationError``; otherwise the user is asked again until it is valid.
    """
    notifier = notifier or NullNotifier()
    while True:
        start = read_time('Start', start_text, 0, notifier, input_fn)
        end = read_time('End', end_text, duration, notifier, input_fn)
        result = validate_time_range(start, end, duration)
        if result.is_valid:
            return start, end
        if start_text is not None and end_text is not None:
            result.raise_for_error()
        notifier.notify(result.error)
        start_text = end_text = None


def print_selection(start: float, end: float, show_milliseconds: bool = False) -> None:
    print(f"- Start:    {format_time_display(start, show_milliseconds)}")
    print(f"- End:      {format_time_display(end, show_milliseconds)}")
    print(f"- Duration: {format_duration_description(start, end)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Trim a video without re-encoding')
    parser.add_argument('input', nargs='?', help='Path of the video to trim')
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('--start', type=str, help=f'Start time ({TIME_FORMATS_HINT})')
    parser.add_argument('--end', type=str, help=f'End time ({TIME_FORMATS_HINT})')
    parser.add_argument('--notes', type=str, help='Notes appended to the output file name')
    parser.add_argument('--output-dir', type=str, help='Directory for the trimmed file (default: next to the input)')
    parser.add_argument('--dry-run', action='store_true', default=None,
                        help='Only print the selected range, do not write anything')
    parser.add_argument('--milliseconds', dest='show_milliseconds', action='store_true', default=None,
                        help='Show milliseconds in printed times')
    parser.add_argument('--info', action='store_true', help='Print video information and exit')
    parser.add_argument('--check-ffmpeg', action='store_true', help='Check that ffmpeg is available and exit')
    return parser


def main(argv=None) -> int:
    """Entry point for the ``video-trimmer`` command"""
    # Minimal logging setup; services use logging for diagnostics.
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)

    try:
        if args.check_ffmpeg:
            check_ffmpeg_installed()
            print("ffmpeg is available.")
            return 0

        config = Config(config_file=args.config or Config.find_default_file())
        config.update_from_args({
            'output_dir': args.output_dir,
            'notes': args.notes,
            'dry_run': args.dry_run,
            'show_milliseconds': args.show_milliseconds,
        })
        show_ms = bool(config.get('show_milliseconds'))

        input_path = args.input
        while not input_path:
            input_path = input("\nPath of the video to trim: ").strip()
            if not input_path:
                print("The path cannot be empty. Try again.")

        info = get_video_info(input_path)
        print_video_info(info, show_ms)
        if args.info:
            return 0

        start, end = choose_range(args.start, args.end, info.duration, ConsoleNotifier())
        print("\nSelected range:")
        print_selection(start, end, show_ms)

        if config.get('dry_run'):
            print("\nDry-run: no file written.")
            return 0

        export_cfg = config.get('export') or {}
        output_path = cut_video(
            input_path,
            start,
            end,
            notes=config.get('notes'),
            output_dir=config.get('output_dir'),
            size_buffer=export_cfg.get('size_buffer', 0.1),
            space_margin=export_cfg.get('space_margin', 0.2),
        )
        print(f"\n✓ Trim complete. New file saved as: {output_path}")
        return 0
    except (KeyboardInterrupt, EOFError):
        print("\nOperation cancelled.")
        return 130
    except (TrimmerError, ConfigError) as e:
        print(e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
