#!/usr/bin/env python3
"""
Name: cat
Description: concatenate and print files, with numbering, end markers, blank squeezing, tab display and per-file line limits
Author: Python Power Tools, after the Perl cat by Abigail, perlpowertools@abigail.be
License: perl
"""

import sys
import os
import argparse
import errno

__version__ = "1.1"

# Constants
EX_SUCCESS = 0
EX_FAILURE = 1
EX_INTERRUPTED = 130

NUMBER_WIDTH = 6
STDIN_NAME = '<stdin>'

def positive_int(text: str) -> int:
    """argparse type for --max-lines: an integer of at least 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid line count: '{text}'")
    if value < 1:
        raise argparse.ArgumentTypeError(f"line count must be at least 1: '{text}'")
    return value

def is_blank(line: str) -> bool:
    """A line is blank when nothing but whitespace is left after trimming."""
    return not line.strip()

def strip_newline(line: str) -> str:
    """Removes one trailing '\\n' and a '\\r' directly before it."""
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line

class CatProcessor:
    """
    Applies the formatting options to one input source at a time.

    The options are read once from the parsed arguments. Line numbering and
    blank-run detection start over for every stream handed to
    process_stream(), so each source is numbered from 1.
    """
    def __init__(self, args, out=None):
        self.out = out if out is not None else sys.stdout
        # -b takes priority over -n
        self.number_nonblank = args.number_nonblank
        self.number = args.number and not args.number_nonblank
        self.show_ends = args.show_ends
        self.squeeze_blank = args.squeeze_blank
        self.show_tabs = args.show_tabs
        self.max_lines = args.max_lines

    def format_line(self, index: int, line: str, blank: bool) -> str:
        """
        Returns the output form of a line whose newline is already removed.
        `index` is the 0-based position of the line in its source and
        `blank` is is_blank() of the untransformed line.
        """
        if self.show_tabs:
            line = line.replace('\t', '^I')
        if self.show_ends:
            line += '$'

        if self.number_nonblank:
            numbered = not blank
        else:
            numbered = self.number

        if numbered:
            return f"{index + 1:{NUMBER_WIDTH}d}\t{line}"
        return line

    def process_stream(self, stream) -> int:
        """
        Copies a stream of lines to the output, returning how many lines
        were written. Read errors propagate to the caller.
        """
        emitted = 0
        was_blank = False

        for index, raw_line in enumerate(stream):
            line = strip_newline(raw_line)
            blank = is_blank(line)

            # Squeezed lines still use up their input index
            if self.squeeze_blank and blank and was_blank:
                continue

            self.out.write(self.format_line(index, line, blank) + '\n')

            emitted += 1
            if self.max_lines is not None and emitted >= self.max_lines:
                break
            was_blank = blank

        return emitted

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Concatenate and print files.",
        usage="%(prog)s [-bnEsT] [-m NUM] [file ...]"
    )
    parser.add_argument(
        '-V', '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument('-n', '--number', action='store_true', help='Number all output lines.')
    parser.add_argument('-b', '--number-nonblank', action='store_true',
                        help='Number non-blank output lines (overrides -n).')
    parser.add_argument('-E', '--show-ends', action='store_true', help='Display $ at end of each line.')
    parser.add_argument('-s', '--squeeze-blank', action='store_true',
                        help='Squeeze multiple adjacent blank lines into one.')
    parser.add_argument('-T', '--show-tabs', action='store_true', help='Display TAB characters as ^I.')
    parser.add_argument('-m', '--max-lines', type=positive_int, default=None, metavar='NUM',
                        help='Stop after NUM output lines of each file.')

    parser.add_argument('files', nargs='*', help="Files to process. Reads from stdin if none are given or for '-'.")
    return parser

def open_source(path: str):
    """
    Returns a readable line stream for an operand. '-' is standard input,
    which is not closed by the caller.
    """
    if path == '-':
        return sys.stdin
    if os.path.isdir(path):
        raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)
    # Only '\n' ends a line; a '\r' before it is dropped by strip_newline().
    return open(path, 'r', newline='\n')

def main(argv=None):
    """Parses arguments and runs the cat logic over each source."""
    parser = build_parser()
    args = parser.parse_args(argv)
    program_name = os.path.basename(sys.argv[0])

    processor = CatProcessor(args)
    exit_status = EX_SUCCESS

    try:
        for path in args.files or ['-']:
            label = STDIN_NAME if path == '-' else path

            try:
                stream = open_source(path)
            except IsADirectoryError:
                print(f"{program_name}: '{path}' is a directory", file=sys.stderr)
                exit_status = EX_FAILURE
                continue
            except OSError as e:
                print(f"{program_name}: failed to open '{path}': {e.strerror}", file=sys.stderr)
                exit_status = EX_FAILURE
                continue

            try:
                processor.process_stream(stream)
            except BrokenPipeError:
                raise
            except (OSError, UnicodeDecodeError) as e:
                print(f"{program_name}: error reading '{label}': {e}", file=sys.stderr)
                exit_status = EX_FAILURE
                # A failed stdin ends the run; other files are still attempted.
                if stream is sys.stdin:
                    break
            finally:
                if stream is not sys.stdin:
                    stream.close()

        sys.stdout.flush()
    except BrokenPipeError:
        # Reader is gone; send the final flush at exit to devnull.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        exit_status = EX_FAILURE
    except KeyboardInterrupt:
        exit_status = EX_INTERRUPTED

    sys.exit(exit_status)

if __name__ == "__main__":
    main()
