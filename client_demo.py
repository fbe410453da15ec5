#!/usr/bin/env python3
#
# PROJECT: kanvas
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import argparse
import curses
import logging
import os
import sys

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from kanvas.demo import main


def parse_args(argv=None):
    """CLI argument parser for the projection demo."""
    epilog = """\
examples:
  %(prog)s                                     Spinning cube
  %(prog)s cobra.obj --size 1                  Load OBJ model at its own scale
  %(prog)s --fov 120 --spin 2                  Wide lens, faster spin
  %(prog)s --ascii --no-color                  ASCII, monochrome
  %(prog)s --log-file kanvas.log -v            Debug log next to the demo
"""
    parser = argparse.ArgumentParser(
        description="Perspective projection demo drawn through Kanvas",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("model", nargs='?', help="Path to .obj file")
    parser.add_argument("--size", type=float, default=100.0,
                        help="Edge length of the demo cube (default: 100)")
    parser.add_argument("--fov", type=float, default=90.0,
                        help="Field of view in degrees, 60-170 (default: 90)")
    parser.add_argument("--spin", type=float, default=0.8,
                        help="Rotation speed in radians per second (default: 0.8)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--fg-color", default="#D0DD14",
                        help="Wireframe color in hex #RRGGBB (default: #D0DD14)")
    parser.add_argument("--bg-color", default="#0E0E2C",
                        help="Background color in hex #RRGGBB (default: #0E0E2C)")
    parser.add_argument("--log-file",
                        help="Write log records to this file (the terminal belongs to curses)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug messages")
    return parser.parse_args(argv)


def setup_logging(args):
    if not args.log_file:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=args.log_file,
        filemode='w',
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def run(argv=None):
    args = parse_args(argv)
    setup_logging(args)
    try:
        curses.wrapper(lambda s: main(s, args))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logging.getLogger(__name__).exception("Demo crashed")
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
