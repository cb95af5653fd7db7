"""Analyze command for reporting component version conflicts in an SBOM."""

import logging
import sys
from typing import Optional

import requests

from ..analyzer import ComponentAnalyzer
from ..formatters import OutputFormatter
from ..models import ExitCode, InputFormat, OutputFormat
from ..parsers import SbomParseError, SbomParser, read_content

logger = logging.getLogger(__name__)


def analyze_sbom(
    input_file: Optional[str] = None,
    input_format: InputFormat = InputFormat.AUTODETECT,
    output_format: OutputFormat = OutputFormat.TEXT,
    multiple_component_versions: bool = False
) -> int:
    """Analyze an SBOM and write the report to stdout.

    Args:
        input_file: Path or URL of the SBOM; None reads standard input
        input_format: Input format, or AUTODETECT
        output_format: Report format
        multiple_component_versions: Report components with multiple versions

    Returns:
        Process exit code
    """
    try:
        content = read_content(input_file)
    except (OSError, UnicodeDecodeError, requests.RequestException) as e:
        logger.error(f"Error reading input: {e}")
        print(f"Error reading input: {e}", file=sys.stderr)
        return ExitCode.INPUT_ERROR

    if not content.strip():
        print("No input SBOM provided", file=sys.stderr)
        return ExitCode.PARAMETER_VALIDATION_ERROR

    detected_format = SbomParser.detect_format(input_file, content, input_format)
    if detected_format is None:
        print("Unable to detect input format, use --input-format to specify it", file=sys.stderr)
        return ExitCode.PARAMETER_VALIDATION_ERROR
    logger.info(f"Input format: {detected_format.value}")

    try:
        components = SbomParser.parse(content, detected_format)
    except SbomParseError as e:
        logger.error(f"Error parsing input SBOM: {e}")
        print(f"Error parsing input SBOM: {e}", file=sys.stderr)
        return ExitCode.INPUT_ERROR

    result = ComponentAnalyzer.analyze(components, multiple_component_versions=multiple_component_versions)

    sys.stdout.write(OutputFormatter.render(result, output_format))

    return ExitCode.OK
