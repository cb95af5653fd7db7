"""Main CLI entry point for bomanalyze."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .commands.analyze import analyze_sbom
from .models import InputFormat, OutputFormat

logger = logging.getLogger(__name__)

LOG_LEVEL_ALIASES = {
    'TRACE': 'DEBUG',
    'WARN': 'WARNING',
}


def setup_logging(verbose: bool = False, log_level: Optional[str] = None):
    """Configure logging based on verbosity flags."""
    if log_level:
        name = LOG_LEVEL_ALIASES.get(log_level.upper(), log_level.upper())
        level = getattr(logging, name, logging.WARNING)
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(message)s'
    )


def handle_analyze(args):
    """Handle the 'analyze' subcommand."""
    setup_logging(args.verbose, args.loglevel)

    return analyze_sbom(
        input_file=args.input_file,
        input_format=InputFormat(args.input_format),
        output_format=OutputFormat(args.output_format),
        multiple_component_versions=args.multiple_component_versions
    )


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog='bomanalyze',
        description='Analyze CycloneDX SBOMs for inconsistencies'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Subcommands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze an SBOM file')
    analyze_parser.add_argument('--input-file',
                                help='Input SBOM file or URL, will read from stdin if no value provided')
    analyze_parser.add_argument('--input-format', default=InputFormat.AUTODETECT.value,
                                choices=[f.value for f in InputFormat],
                                help='Input file format (autodetect, json, xml). Default: autodetect')
    analyze_parser.add_argument('--output-format', default=OutputFormat.TEXT.value,
                                choices=[f.value for f in OutputFormat],
                                help='Output format (text, json). Default: text')
    analyze_parser.add_argument('--multiple-component-versions', action='store_true',
                                help='Report components that have multiple versions in use')
    analyze_parser.add_argument('-v', '--verbose', action='store_true', help='Verbose logging')
    analyze_parser.add_argument('--loglevel', choices=['TRACE', 'DEBUG', 'INFO', 'WARN', 'ERROR'],
                                help='Set log level')
    analyze_parser.set_defaults(func=handle_analyze)

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Execute command
    try:
        return int(args.func(args))
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
