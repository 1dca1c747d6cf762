"""
Unit tests for reference extraction.
"""

from ssm_param_resolver.core.models import Reference, ScalarString, StringList
from ssm_param_resolver.core.resolution.extractor import extract_raw_references, extract_references


class TestExtractReferences:
    """Test extraction from resolvable inputs."""

    def test_scalar_string(self):
        """References in a single string are found with their names."""
        refs = extract_references(ScalarString("db={{ssm:/app/db/host}}:{{ ssm:/app/db/port }}"))

        assert refs == [
            Reference(raw="{{ssm:/app/db/host}}", name="/app/db/host"),
            Reference(raw="{{ ssm:/app/db/port }}", name="/app/db/port"),
        ]

    def test_duplicates_kept_in_discovery_order(self):
        """Every occurrence is returned, including repeats."""
        refs = extract_references(ScalarString("{{ssm:/b}} {{ssm:/a}} {{ssm:/b}}"))
        assert [r.name for r in refs] == ["/b", "/a", "/b"]

    def test_string_list_walked_in_order(self):
        """List elements are scanned in order."""
        refs = extract_references(StringList(("{{ssm:/a}}", "plain", "{{ ssm:/b }}")))
        assert [r.raw for r in refs] == ["{{ssm:/a}}", "{{ ssm:/b }}"]

    def test_no_references(self):
        """Plain text yields no references."""
        assert extract_references(ScalarString("nothing {{ here }}")) == []


class TestExtractRawReferences:
    """Test extraction from arbitrary values."""

    def test_string(self):
        assert extract_raw_references("x={{ssm:/x}}") == ["{{ssm:/x}}"]

    def test_list(self):
        assert extract_raw_references(["{{ssm:/x}}", "{{ ssm:/x }}"]) == ["{{ssm:/x}}", "{{ ssm:/x }}"]

    def test_unsupported_shapes_return_empty(self):
        """Dicts, numbers and mixed lists are not scanned."""
        assert extract_raw_references({"key": "{{ssm:/x}}"}) == []
        assert extract_raw_references(42) == []
        assert extract_raw_references(["{{ssm:/x}}", 1]) == []
        assert extract_raw_references(None) == []
