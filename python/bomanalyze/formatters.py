"""Output formatters for analysis results."""

import json
import logging
from typing import Any, Dict

from .models import AnalysisResult, OutputFormat

logger = logging.getLogger(__name__)


class OutputFormatter:
    """Formatter for the supported report formats."""

    @staticmethod
    def render(result: AnalysisResult, output_format: OutputFormat) -> str:
        """Render a result in the requested format."""
        if output_format == OutputFormat.JSON:
            return OutputFormatter.format_as_json(result)
        return OutputFormatter.format_as_text(result)

    @staticmethod
    def format_as_json(result: AnalysisResult) -> str:
        """Format the result as a JSON document.

        Analyses that were not requested are left out of the document;
        analyses that ran without findings appear as empty lists.
        """
        report: Dict[str, Any] = {}

        if result.multiple_component_versions is not None:
            report['multipleComponentVersions'] = [
                [component.to_dict() for component in group]
                for group in result.multiple_component_versions
            ]

        return json.dumps(report, indent=2) + '\n'

    @staticmethod
    def format_as_text(result: AnalysisResult) -> str:
        """Format the result as a human readable summary."""
        lines = []

        if result.multiple_component_versions is not None:
            lines.append("Components with multiple versions:")
            if not result.multiple_component_versions:
                lines.append("None")
            for group in result.multiple_component_versions:
                versions = ' '.join(component.version or '' for component in group)
                lines.append(f"{group[0].name} versions: {versions}")

        if not lines:
            return ''
        return '\n'.join(lines) + '\n'
