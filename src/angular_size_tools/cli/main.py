"""CLI entry point: angular-size-tools compute|bodies subcommands."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import NoReturn, cast

from angular_size_tools.angular_size import run_angular_size
from angular_size_tools.bodies import display_label
from angular_size_tools.catalog import list_body_names
from angular_size_tools.constants import DEFAULT_OBSERVER, DEFAULT_TARGET, DEFAULT_YEARS
from angular_size_tools.input_params import write_input_parameters, write_result_summary
from angular_size_tools.params import AngularSizeParams, parse_body, parse_years


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or ANGULAR_SIZE_TOOLS_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('ANGULAR_SIZE_TOOLS_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )
    # Suppress noisy third-party DEBUG (font lookup etc.).
    for name in ('matplotlib', 'PIL'):
        logging.getLogger(name).setLevel(logging.WARNING)


def _compute_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Run the angular size computation (compute subcommand).

    Parameters:
        parser: Argument parser (unused).
        args: Parsed args; observer, target, years, outputs.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    params = AngularSizeParams(
        observer=args.observer,
        target=args.target,
        years=args.years,
        data_path=args.data_dir,
        title=(args.title or '').strip(),
        output_png=args.output,
    )
    write_input_parameters(sys.stdout, params)

    try:
        if args.output_txt is not None:
            with open(args.output_txt, 'w') as f:
                result = run_angular_size(params, output_txt=f)
        else:
            result = run_angular_size(params, output_txt=sys.stdout)
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    write_result_summary(sys.stdout, result)
    return 0


def _bodies_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """List body names from the manifest (bodies subcommand)."""
    try:
        names = list_body_names(args.data_dir)
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    for name in names:
        print(f'{name:10s} {display_label(name)}')
    return 0


def main() -> int:
    """Entry point for angular-size-tools CLI (compute | bodies).

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='angular-size-tools',
        description='Apparent angular diameter of one planet as seen from another.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    compute_parser = subparsers.add_parser(
        'compute', help='Angular size series and apsis bounds'
    )
    compute_parser.add_argument(
        '--observer',
        type=parse_body,
        default=DEFAULT_OBSERVER,
        help=f'Observing body name (default {DEFAULT_OBSERVER})',
    )
    compute_parser.add_argument(
        '--target',
        type=parse_body,
        default=DEFAULT_TARGET,
        help=f'Observed body name (default {DEFAULT_TARGET})',
    )
    compute_parser.add_argument(
        '--years',
        type=parse_years,
        default=DEFAULT_YEARS,
        help=f'Years to show from the first sample (default {DEFAULT_YEARS})',
    )
    compute_parser.add_argument(
        '--data-dir',
        type=str,
        default=None,
        help='Directory with manifest.json and body files; env: ANGULAR_SIZE_DATA',
    )
    compute_parser.add_argument('--title', type=str, default='', help='Plot title')
    compute_parser.add_argument(
        '-o', '--output', type=str, default=None, help='Chart image file (e.g. chart.png)'
    )
    compute_parser.add_argument(
        '--output-txt', type=str, default=None, help='Text table file (default stdout)'
    )
    compute_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    compute_parser.set_defaults(func=_compute_cmd)

    bodies_parser = subparsers.add_parser('bodies', help='List available bodies')
    bodies_parser.add_argument(
        '--data-dir',
        type=str,
        default=None,
        help='Directory with manifest.json; env: ANGULAR_SIZE_DATA',
    )
    bodies_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    bodies_parser.set_defaults(func=_bodies_cmd)

    args = parser.parse_args()
    _configure_logging(verbose=args.verbose)
    return cast(int, args.func(parser, args))


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
