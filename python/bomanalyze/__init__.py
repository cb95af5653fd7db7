"""bomanalyze - report components declared with more than one version in an SBOM."""

__version__ = "1.0.0"
