"""Tests for analysis result formatting."""

import json

from bomanalyze.formatters import OutputFormatter
from bomanalyze.models import AnalysisResult, Component, OutputFormat


class TestJsonFormat:
    """Tests for the JSON report."""

    def test_not_requested_omits_field(self):
        output = OutputFormatter.format_as_json(AnalysisResult())

        assert json.loads(output) == {}

    def test_requested_without_conflicts_is_empty_list(self):
        output = OutputFormatter.format_as_json(AnalysisResult(multiple_component_versions=[]))

        assert json.loads(output) == {"multipleComponentVersions": []}

    def test_groups_serialize_original_records(self):
        first = Component(name="A", version="1.0", raw={
            "type": "library", "bom-ref": "pkg:npm/A@1.0", "name": "A", "version": "1.0",
            "purl": "pkg:npm/A@1.0",
        })
        second = Component(name="A", version="2.0", raw={
            "type": "library", "name": "A", "version": "2.0",
            "hashes": [{"alg": "SHA-256", "content": "abc"}],
        })

        output = OutputFormatter.format_as_json(AnalysisResult(multiple_component_versions=[[first, second]]))
        report = json.loads(output)

        assert report["multipleComponentVersions"] == [[first.raw, second.raw]]
        assert list(report["multipleComponentVersions"][0][0].keys()) == ["type", "bom-ref", "name", "version", "purl"]

    def test_component_without_record_uses_name_and_version(self):
        result = AnalysisResult(multiple_component_versions=[[
            Component(name="A", version="1.0"),
            Component(name="A", version=None),
        ]])

        report = json.loads(OutputFormatter.format_as_json(result))

        assert report["multipleComponentVersions"] == [[{"name": "A", "version": "1.0"}, {"name": "A"}]]

    def test_output_is_indented_and_newline_terminated(self):
        output = OutputFormatter.format_as_json(AnalysisResult(multiple_component_versions=[]))

        assert output == '{\n  "multipleComponentVersions": []\n}\n'


class TestTextFormat:
    """Tests for the text report."""

    def test_not_requested_is_empty(self):
        assert OutputFormatter.format_as_text(AnalysisResult()) == ''

    def test_requested_without_conflicts_prints_none(self):
        output = OutputFormatter.format_as_text(AnalysisResult(multiple_component_versions=[]))

        assert output == "Components with multiple versions:\nNone\n"

    def test_one_line_per_group(self):
        result = AnalysisResult(multiple_component_versions=[
            [Component(name="A", version="1.0"), Component(name="A", version="2.0")],
            [Component(name="B", version="1"), Component(name="B", version="1"), Component(name="B", version="3")],
        ])

        output = OutputFormatter.format_as_text(result)

        assert output == (
            "Components with multiple versions:\n"
            "A versions: 1.0 2.0\n"
            "B versions: 1 1 3\n"
        )

    def test_missing_version_renders_empty(self):
        result = AnalysisResult(multiple_component_versions=[
            [Component(name="A", version="1.0"), Component(name="A", version=None)],
        ])

        assert OutputFormatter.format_as_text(result).splitlines()[1] == "A versions: 1.0 "


class TestRender:
    """Tests for output format dispatch."""

    def test_dispatches_on_output_format(self):
        result = AnalysisResult(multiple_component_versions=[])

        assert OutputFormatter.render(result, OutputFormat.TEXT) == OutputFormatter.format_as_text(result)
        assert OutputFormatter.render(result, OutputFormat.JSON) == OutputFormatter.format_as_json(result)
