"""SBOM readers for the supported input formats."""

import json
import logging
import re
import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

import requests
from cyclonedx.schema import SchemaVersion

from .models import Component, InputFormat

logger = logging.getLogger(__name__)

HTTP_TIMEOUT = 30

CYCLONEDX_NAMESPACE_PATTERN = re.compile(r'^\{http://cyclonedx\.org/schema/bom/(\d+\.\d+)\}bom$')

# XML elements whose children map to a JSON array
XML_LIST_CONTAINERS = {
    'ancestors', 'authors', 'commits', 'components', 'dependencies', 'descendants',
    'externalReferences', 'hashes', 'licenses', 'omniborId', 'patches', 'properties',
    'resolves', 'services', 'swhid', 'tags', 'variants',
}

# Children that are JSON arrays even when they appear once
XML_REPEATED_CHILDREN = {
    'manufacturer': {'contact', 'url'},
    'provider': {'contact', 'url'},
    'supplier': {'contact', 'url'},
}


class SbomParseError(ValueError):
    """Raised when an SBOM document cannot be read into components."""


def _is_url(path: str) -> bool:
    """Check if a path is a URL."""
    return urlparse(path).scheme in ('http', 'https')


def read_content(path: Optional[str] = None) -> str:
    """
    Read SBOM text from a file path, a URL, or standard input.

    Args:
        path: File path or URL; None or '-' reads standard input

    Returns:
        Content as string

    Raises:
        OSError: If the file can't be read
        requests.RequestException: If URL fetch fails
    """
    if path is None or path == '-':
        logger.info("Reading content from standard input")
        return sys.stdin.read()
    if _is_url(path):
        logger.info(f"Fetching content from URL: {path}")
        response = requests.get(path, timeout=HTTP_TIMEOUT)
        response.raise_for_status()
        return response.text
    logger.info(f"Reading content from file: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def _local_name(tag: str) -> str:
    """Strip the namespace from an ElementTree tag."""
    return tag.rsplit('}', 1)[-1]


def _xml_to_record(elem: ET.Element) -> Any:
    """Convert a CycloneDX XML element to its JSON-shaped equivalent."""
    tag = _local_name(elem.tag)
    children = list(elem)
    text = elem.text or ''

    # Leaf values are kept verbatim; versions compare as exact strings
    if not children and not elem.attrib:
        return text

    if tag in XML_LIST_CONTAINERS:
        if tag == 'licenses':
            # JSON wraps each entry: [{"license": {...}}] or [{"expression": "..."}]
            return [{_local_name(child.tag): _xml_to_record(child)} for child in children]
        return [_xml_to_record(child) for child in children]

    record: Dict[str, Any] = dict(elem.attrib)
    repeated = XML_REPEATED_CHILDREN.get(tag, set())
    for child in children:
        key = _local_name(child.tag)
        value = _xml_to_record(child)
        if key in repeated:
            record.setdefault(key, []).append(value)
        elif key in record:
            if not isinstance(record[key], list):
                record[key] = [record[key]]
            record[key].append(value)
        else:
            record[key] = value

    if text.strip():
        record['value' if tag == 'property' else 'content'] = text

    return record


def _record_to_component(record: Dict[str, Any], index: int) -> Component:
    """Build a Component, requiring name and version to be strings when present."""
    for key in ('name', 'version'):
        value = record.get(key)
        if value is not None and not isinstance(value, str):
            raise SbomParseError(
                f"Component at index {index} has a non-string {key}: {value!r}"
            )
    return Component(name=record.get('name'), version=record.get('version'), raw=record)


def _log_schema_version(version: Optional[str]) -> None:
    """Log the declared CycloneDX spec version; unknown versions only warn."""
    if not version:
        logger.warning("SBOM does not declare a CycloneDX spec version")
        return
    try:
        schema_version = SchemaVersion.from_version(version).to_version()
    except (AttributeError, KeyError, ValueError):
        logger.warning(f"Unrecognized CycloneDX spec version: {version}")
        return
    logger.info(f"CycloneDX spec version: {schema_version}")


class SbomParser:
    """Parser for CycloneDX SBOM documents."""

    @staticmethod
    def detect_format(path: Optional[str], content: str,
                      requested: InputFormat = InputFormat.AUTODETECT) -> Optional[InputFormat]:
        """
        Decide the input format.

        An explicit format wins, then the file extension, then the first
        non-blank character of the content. Returns None if undetectable.
        """
        if requested != InputFormat.AUTODETECT:
            return requested

        if path and path != '-':
            suffix = Path(urlparse(path).path).suffix.lower()
            if suffix == '.json':
                return InputFormat.JSON
            if suffix == '.xml':
                return InputFormat.XML

        stripped = content.lstrip()
        if stripped.startswith('{'):
            return InputFormat.JSON
        if stripped.startswith('<'):
            return InputFormat.XML
        return None

    @staticmethod
    def parse(content: str, input_format: InputFormat) -> List[Component]:
        """Parse SBOM content in a known format."""
        if input_format == InputFormat.JSON:
            return SbomParser.parse_json(content)
        if input_format == InputFormat.XML:
            return SbomParser.parse_xml(content)
        raise SbomParseError(f"Unsupported input format: {input_format.value}")

    @staticmethod
    def parse_json(content: str) -> List[Component]:
        """Parse the top-level components of a CycloneDX JSON SBOM."""
        try:
            sbom = json.loads(content)
        except json.JSONDecodeError as e:
            raise SbomParseError(f"Invalid JSON: {e}") from e

        if not isinstance(sbom, dict):
            raise SbomParseError("SBOM must be a JSON object")

        bom_format = sbom.get('bomFormat')
        if bom_format is not None and bom_format != 'CycloneDX':
            logger.warning(f"Unexpected bomFormat: {bom_format}")
        _log_schema_version(sbom.get('specVersion'))

        records = sbom.get('components') or []
        if not isinstance(records, list):
            raise SbomParseError("'components' must be an array")

        components = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise SbomParseError(f"Component at index {index} is not an object")
            components.append(_record_to_component(record, index))

        logger.info(f"Parsed {len(components)} components from JSON SBOM")
        return components

    @staticmethod
    def parse_xml(content: str) -> List[Component]:
        """Parse the top-level components of a CycloneDX XML SBOM."""
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise SbomParseError(f"Invalid XML: {e}") from e

        match = CYCLONEDX_NAMESPACE_PATTERN.match(root.tag)
        if not match:
            raise SbomParseError(f"Not a CycloneDX bom element: {root.tag}")
        _log_schema_version(match.group(1))

        ns = root.tag[1:].split('}', 1)[0]
        components = []
        components_elem = root.find(f'{{{ns}}}components')
        if components_elem is not None:
            for index, elem in enumerate(components_elem.findall(f'{{{ns}}}component')):
                record = _xml_to_record(elem)
                if not isinstance(record, dict):
                    record = {}
                components.append(_record_to_component(record, index))

        logger.info(f"Parsed {len(components)} components from XML SBOM")
        return components
