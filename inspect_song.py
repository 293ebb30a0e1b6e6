#!/usr/bin/env python
import argparse
import logging
import pathlib
import sys

from smparser.classes.base import StrictModeError
from smparser.parser.sm import SMParser

SUPPORTED_SUFFIXES = {".sm", ".dwi"}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Reads a SM/DWI file and prints out its timing, charts and parse warnings."
    )
    parser.add_argument("filename", nargs="+", help="input SM/DWI file(s) to read")
    parser.add_argument("--porcelain", action="store_true", help="produce machine readable output")
    parser.add_argument("--strict", action="store_true", help="treat any parse warning as an error")
    parser.add_argument("--no-comments", action="store_true", help="do not skip // comments while reading tags")
    parser.add_argument("--log-level", action="store", help="change logging level. invalid values are silently ignored")
    args = parser.parse_args(argv)

    log_level = logging.WARNING
    if args.log_level is not None:
        try:
            log_level_int = int(args.log_level)
            if log_level_int in logging._levelToName:
                log_level = log_level_int
        except ValueError:
            log_level_str = args.log_level.upper()
            log_level = logging._nameToLevel.get(log_level_str, log_level)
    logging.basicConfig(format="[%(levelname)s %(asctime)s] %(filename)s: %(message)s", level=log_level)

    song_parser = SMParser(ignore_comments=not args.no_comments, strict=args.strict)
    for fn in args.filename:
        try:
            fpath = pathlib.Path(fn)
            if fpath.suffix.lower() not in SUPPORTED_SUFFIXES:
                raise OSError("invalid file extension")

            result = song_parser.parse_file(fpath)
            song = result.song
            timing = song.timing_info

            if args.porcelain:
                print(
                    "\t".join(
                        str(n)
                        for n in [
                            len(song.steps),
                            len(timing.bpm_segments),
                            len(timing.stop_segments),
                            len(result.warnings),
                        ]
                    )
                )
                for steps in song.steps:
                    print(
                        "\t".join(
                            str(n)
                            for n in [
                                steps.type.name,
                                steps.difficulty.name,
                                steps.meter_index_offset,
                                steps.note_data.measure_count if steps.note_data is not None else 0,
                            ]
                        )
                    )
            else:
                print(fn)
                print("=====    SONG    =====")
                print(f"TITLE            | {song.title}")
                print(f"ARTIST           | {song.artist}")
                print(f"OFFSET           | {timing.first_beat_offset_in_seconds:>9.3f}")
                print("=====   TIMING   =====")
                for segment in timing.bpm_segments:
                    print(f"BPM  @ row {segment.start_row_index:>6} | {segment.beats_per_minute:>9.3f}")
                for stop in timing.stop_segments:
                    print(f"STOP @ row {stop.start_row_index:>6} | {stop.stop_time_in_seconds:>9.3f}")
                print("=====   CHARTS   =====")
                for steps in song.steps:
                    measures = steps.note_data.measure_count if steps.note_data is not None else 0
                    print(f"{steps.type!s:<24} | {steps.difficulty!s:<14} | {steps.meter_index_offset:>3} | {measures:>4}m")
                if result.warnings:
                    print("=====  WARNINGS  =====")
                    for diagnostic in result.warnings:
                        print(diagnostic.message)
                print()
        except (OSError, ValueError) as err:
            if args.porcelain:
                print("\t".join(["-1"] * 4))
                continue
            if isinstance(err, StrictModeError):
                for diagnostic in err.diagnostics:
                    print(f"{parser.prog}: warning: {diagnostic.message}")
            print(f"{parser.prog}: {type(err).__name__}: {err}")
            print(f"{parser.prog}: error: unable to parse file, or no such file: {fn!r}")
            return 3

    return 0


if __name__ == "__main__":
    sys.exit(main())
