"""Detection of components declared with more than one version."""

import logging
from collections import OrderedDict
from typing import Dict, List, Optional, Sequence

from .models import AnalysisResult, Component

logger = logging.getLogger(__name__)


class ComponentAnalyzer:
    """Analyses over the flat component list of an SBOM."""

    @staticmethod
    def group_by_name(components: Sequence[Component]) -> Dict[Optional[str], List[Component]]:
        """Group components by name.

        Names keep the order in which they were first seen, and members keep
        input order within each group.
        """
        groups: Dict[Optional[str], List[Component]] = OrderedDict()
        for component in components:
            if component.name not in groups:
                groups[component.name] = []
            groups[component.name].append(component)
        return groups

    @staticmethod
    def find_multiple_component_versions(components: Sequence[Component]) -> List[List[Component]]:
        """
        Find component names that are declared with differing versions.

        A group is reported when any member's version differs from the first
        member's version (exact string comparison). The whole group is
        reported, including members that match the first version.

        Args:
            components: Components in document order

        Returns:
            Conflicting groups, in order of first appearance
        """
        conflicts: List[List[Component]] = []

        for name, group in ComponentAnalyzer.group_by_name(components).items():
            if len(group) < 2:
                continue

            first_version = group[0].version
            if any(component.version != first_version for component in group):
                logger.debug(f"Component {name} has versions: {[c.version for c in group]}")
                conflicts.append(group)

        logger.info(f"Found {len(conflicts)} component(s) with multiple versions "
                    f"among {len(components)} components")
        return conflicts

    @staticmethod
    def analyze(components: Sequence[Component], multiple_component_versions: bool = False) -> AnalysisResult:
        """Run the requested analyses and collect them into one result."""
        result = AnalysisResult()

        if multiple_component_versions:
            result.multiple_component_versions = ComponentAnalyzer.find_multiple_component_versions(components)

        return result
