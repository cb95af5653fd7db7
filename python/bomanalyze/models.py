"""Core data models for bomanalyze."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional


class InputFormat(Enum):
    """Input SBOM formats accepted by the analyze command."""

    AUTODETECT = "autodetect"
    JSON = "json"
    XML = "xml"


class OutputFormat(Enum):
    """Report formats produced by the analyze command."""

    TEXT = "text"
    JSON = "json"


class ExitCode(IntEnum):
    """Process exit codes."""

    OK = 0
    PARAMETER_VALIDATION_ERROR = 1
    INPUT_ERROR = 2


@dataclass(frozen=True)
class Component:
    """A single SBOM component entry.

    Only ``name`` and ``version`` take part in the analysis. ``raw`` holds the
    record exactly as it appeared in the document and is what ends up in the
    JSON report.
    """

    name: Optional[str]
    version: Optional[str]
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return the component record for structured output."""
        if self.raw:
            return dict(self.raw)
        record = {'name': self.name, 'version': self.version}
        return {k: v for k, v in record.items() if v is not None}

    def __str__(self) -> str:
        return f"{self.name}@{self.version}"


@dataclass
class AnalysisResult:
    """Outcome of one analyze run.

    ``multiple_component_versions`` is None when that analysis was not
    requested, and an empty list when it ran and found nothing.
    """

    multiple_component_versions: Optional[List[List[Component]]] = None
