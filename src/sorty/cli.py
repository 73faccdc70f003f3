import argparse
import logging
import sys
import textwrap
from pathlib import Path

from .errors import SortyError
from .report.text import render_report
from .scanner import LOG_FORMAT, LOG_LEVELS, Scanner
from .settings import ScanSettings
from .utils.profiling import profile_main


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sorty',
        description='Find files with identical content in a directory tree and list empty files.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent('''
            Examples:
              sorty
              sorty /home/user/documents
              sorty -r /home/user/documents

            Files are compared by content, not by name. Files of a size no other
            file shares are never read. Symbolic links are skipped.
            ''').strip()
    )
    parser.add_argument(
        'path',
        nargs='?',
        default='.',
        metavar='PATH',
        help='Directory (or single file) to scan (default: current directory)')
    parser.add_argument(
        '-r', '--recursive',
        action='store_true',
        help='Traverse subdirectories')
    parser.add_argument(
        '--config',
        metavar='PATH',
        help='Path to a TOML settings file. If not provided, uses the SORTY_CONFIG environment variable or no '
             'settings.')
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log progress information to stderr')
    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help='Path to log file for operation logging. If not provided, uses logging.path from settings or stderr.')
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        choices=LOG_LEVELS,
        help='Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to INFO when --log-file or --verbose '
             'is provided.')
    return parser


def _configure_logging(args):
    if not (args.log_file or args.verbose or args.log_level):
        return

    log_level = args.log_level
    if log_level is None:
        log_level = 'INFO'

    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=getattr(logging, log_level), format=LOG_FORMAT)
    else:
        logging.basicConfig(stream=sys.stderr, level=getattr(logging, log_level), format=LOG_FORMAT)


def run(argv: list[str] | None = None, output=None) -> int:
    """Parse argv, run a scan and print the report. Returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args)

    try:
        settings = ScanSettings.locate(args.config)
        scanner = Scanner(settings)
    except (OSError, ValueError) as e:
        print(f"Error: cannot load settings: {e}", file=sys.stderr)
        return 1

    if not args.log_file:
        try:
            scanner.configure_logging_from_settings()
        except ValueError as e:
            print(f"Error: cannot load settings: {e}", file=sys.stderr)
            return 1
        except OSError as e:
            print(f"Error: cannot open log file: {e}", file=sys.stderr)
            return 1

    path = Path(args.path)
    if not path.exists():
        print(f"Error: Path {str(path)!r} does not exist", file=sys.stderr)
        return 1

    try:
        result = scanner.scan(path, args.recursive)
    except SortyError as e:
        cause = f": {e.__cause__}" if e.__cause__ is not None else ""
        print(f"Error: {e}{cause}", file=sys.stderr)
        return 1

    render_report(result, output)
    return 0


@profile_main
def sorty_main():
    sys.exit(run())


if __name__ == '__main__':
    sorty_main()
