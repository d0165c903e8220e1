#!/usr/bin/env python3
"""
patchgen - build a sampler patch from a folder of samples

Usage:
    patchgen path/to/kick
    patchgen path/to/kick --mode preset
    patchgen path/to/kick --key-start 48 --filter wav --template my_template.json
    patchgen path/to/kick --config patch_config.py --dry-run
"""

import argparse
import os
import stat
import sys

from patchgen import __description__, __version__, console, defaults
from patchgen.config import load_config, resolve_settings
from patchgen.errors import InvalidDirectoryError, PatchgenError
from patchgen.pipeline import PatchGenerator
from patchgen.scanner import SampleFilter
from patchgen.writer import OutputMode


def directory_path(path):
    try:
        mode = os.lstat(path).st_mode
    except OSError as e:
        raise InvalidDirectoryError(f"{path} is not a valid path! ({e})")
    if not stat.S_ISDIR(mode):
        raise InvalidDirectoryError(f"{path} is not a valid directory!")
    return path


def build_parser():
    parser = argparse.ArgumentParser(
        prog="patchgen",
        description=__description__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  patchgen samples/kick                  # Write samples/kick/patch.json
  patchgen samples/kick --mode preset    # Create samples/kick.preset/ with copies of the samples
  patchgen samples/kick --dry-run        # Show what would be done
        """
    )
    parser.add_argument('-v', '--version', action='version', version=__version__)
    parser.add_argument('directory', type=directory_path, help='Directory containing samples')
    parser.add_argument('--template', help='JSON template to use (default: bundled template.json)')
    parser.add_argument(
        '--key-start',
        type=int,
        help=f'Starting key to use (default: {defaults.KEY_START})'
    )
    parser.add_argument(
        '--filter',
        dest='sample_filter',
        choices=[f.value for f in SampleFilter],
        help=f'"audio" accepts .wav/.aiff in any case, "wav" only names ending in .wav '
             f'(default: {defaults.SAMPLE_FILTER})'
    )
    parser.add_argument(
        '--mode',
        dest='output_mode',
        choices=[m.value for m in OutputMode],
        help=f'Write patch.json in place or create a new .preset directory '
             f'(default: {defaults.OUTPUT_MODE})'
    )
    parser.add_argument(
        '--threads',
        type=int,
        metavar='N',
        help=f'Worker threads for file reads and copies (default: {defaults.THREADS})'
    )
    parser.add_argument(
        '--max-attempts',
        dest='max_preset_attempts',
        type=int,
        metavar='N',
        help=f'Preset directory names to try before giving up (default: {defaults.MAX_PRESET_ATTEMPTS})'
    )
    parser.add_argument('--config', metavar='FILE', help='Python config file overriding the defaults')
    parser.add_argument('--dry-run', action='store_true', help='Show what would be done without writing anything')
    parser.add_argument('--verbose', action='store_true', help='Print debug output')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    console.set_verbose(args.verbose)
    console.banner(__description__, __version__)

    try:
        config = load_config(args.config) if args.config else None
        settings = resolve_settings(
            config,
            template=args.template,
            key_start=args.key_start,
            sample_filter=args.sample_filter,
            output_mode=args.output_mode,
            threads=args.threads,
            max_preset_attempts=args.max_preset_attempts,
            dry_run=args.dry_run or None,
        )
        PatchGenerator(args.directory, settings).run()
    except PatchgenError as e:
        console.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
