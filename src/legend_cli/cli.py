"""
Command-line interface for the legend patcher.
"""

import argparse
import logging
import os
import sys
from typing import List, Set

from legend import (
    FirstCandidateResolver,
    LegendError,
    LegendPatcher,
    LegendResolver,
    LegendSettings,
    SkipResolver,
    number_lines,
)

from .console_resolver import ConsoleResolver
from .reporter import LegendReporter


DEFAULT_CONFIG = 'legend.yaml'


def main(argv: List[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='legend',
        description="Apply legend edit scripts to text by line content",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Script directives:
  D-<line>                      delete a line
  M-<old line> / M+-<new line>  replace a line
  AF+<anchor> / NAD+<new line>  insert lines after an anchor

Examples:
  %(prog)s apply app.js fix.legend              # Apply, asking about ambiguities
  %(prog)s apply app.js fix.legend -r first -o out.js
  %(prog)s parse fix.legend                     # Preview hunks
  %(prog)s number app.js                        # Line-numbered view
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Apply command
    apply_parser = subparsers.add_parser('apply', help='Apply a script to a file')
    apply_parser.add_argument('original', help='File to patch')
    apply_parser.add_argument('script', help='Legend script file')
    apply_parser.add_argument('--output', '-o', help='Output file path (stdout if omitted)')
    apply_parser.add_argument('--resolve', '-r', choices=['ask', 'first', 'skip'], default='ask',
                              help='How to settle ambiguous matches')
    apply_parser.add_argument('--hunks', help='Comma separated 1-indexed hunks to apply')
    apply_parser.add_argument('--annotate', '-a', action='store_true',
                              help='Print the annotated change view')
    apply_parser.add_argument('--stats', '-s', action='store_true',
                              help='Print operation counts')
    apply_parser.add_argument('--format', '-f', choices=['text', 'json'], default='text',
                              help='Output format')
    apply_parser.add_argument('--config', '-c', help='Settings file path')
    apply_parser.add_argument('--strict', action='store_true',
                              help='Treat unrecognised script lines as errors')
    apply_parser.add_argument('--verbose', '-v', action='store_true',
                              help='Verbose output')

    # Parse command
    parse_parser = subparsers.add_parser('parse', help='Preview the hunks in a script')
    parse_parser.add_argument('script', help='Legend script file')
    parse_parser.add_argument('--strict', action='store_true',
                              help='Treat unrecognised script lines as errors')

    # Number command
    number_parser = subparsers.add_parser('number', help='Show a file with line numbers')
    number_parser.add_argument('original', help='File to number')

    # Init config command
    init_parser = subparsers.add_parser('init-config', help='Create default settings')
    init_parser.add_argument('--config', '-c', default=DEFAULT_CONFIG,
                             help='Settings file path')
    init_parser.add_argument('--force', action='store_true',
                             help='Overwrite existing settings')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(getattr(args, 'verbose', False))

    try:
        if args.command == 'apply':
            return handle_apply(args)
        elif args.command == 'parse':
            return handle_parse(args)
        elif args.command == 'number':
            return handle_number(args)
        elif args.command == 'init-config':
            return handle_init_config(args)
        else:
            print(f"Unknown command: {args.command}")
            return 1

    except LegendError as e:
        print(f"Error: {e}")
        if e.error_details:
            for key, value in e.error_details.items():
                print(f"  {key}: {value}")
        return 1

    except OSError as e:
        print(f"Error: {e}")
        return 1


def setup_logging(verbose: bool) -> None:
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def handle_apply(args: argparse.Namespace) -> int:
    """Handle the apply command."""
    settings = LegendSettings.load_from_file(args.config) if args.config else LegendSettings()
    original_text = read_text(args.original)
    script_text = read_text(args.script)

    patcher = LegendPatcher(settings, strict=args.strict)
    enabled = parse_hunk_list(args.hunks) if args.hunks else None

    resolver = make_resolver(args.resolve)
    result = patcher.patch(original_text, script_text, resolver, enabled)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(result.text)

    reporter = LegendReporter()
    if args.format == 'json':
        print(reporter.format_json(result))
        return 0

    if args.output:
        print(f"Patched text written to: {args.output}")

    else:
        sys.stdout.write(result.text)

    if args.annotate:
        print()
        print("Annotated Diff")
        print(reporter.format_annotated(result))

    if args.stats:
        print()
        print(reporter.format_statistics(result.statistics))

    return 0


def handle_parse(args: argparse.Namespace) -> int:
    """Handle the parse command."""
    patcher = LegendPatcher(strict=args.strict)
    operations = patcher.parse(read_text(args.script))
    print(LegendReporter().format_hunks(operations))
    return 0


def handle_number(args: argparse.Namespace) -> int:
    """Handle the number command."""
    print(number_lines(read_text(args.original)))
    return 0


def handle_init_config(args: argparse.Namespace) -> int:
    """Handle the init-config command."""
    if os.path.exists(args.config) and not args.force:
        print(f"Settings file already exists: {args.config}")
        print("Use --force to overwrite.")
        return 1

    LegendSettings().save_to_file(args.config)
    print(f"Created default settings: {args.config}")
    return 0


def make_resolver(mode: str) -> LegendResolver:
    """Create the resolver for a --resolve mode."""
    if mode == 'first':
        return FirstCandidateResolver()

    if mode == 'skip':
        return SkipResolver()

    return ConsoleResolver(input_func=prompt_stderr, output=sys.stderr)


def prompt_stderr(prompt: str) -> str:
    """Prompt on stderr and read a reply from stdin."""
    # stdout carries the patched text
    print(prompt, end='', file=sys.stderr, flush=True)
    return sys.stdin.readline()


def parse_hunk_list(text: str) -> Set[int]:
    """
    Parse a comma separated list of 1-indexed hunk numbers.

    Args:
        text: e.g. "1,3,4"

    Returns:
        Set of 0-indexed hunk indices

    Raises:
        LegendError: If an entry isn't a positive number
    """
    hunks = set()
    for part in text.split(','):
        part = part.strip()
        if not part:
            continue

        if not part.isdigit() or int(part) < 1:
            raise LegendError(f"Invalid hunk number: {part}", {'hunks': text})

        hunks.add(int(part) - 1)

    return hunks


def read_text(path: str) -> str:
    """Read a UTF-8 text file."""
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()
