"""
Unit tests for ParameterResolver and the module-level resolve functions.

Exercises the full pipeline against an in-memory parameter store.
"""

from unittest.mock import MagicMock, patch

import pytest

from ssm_param_resolver.core.exceptions import (
    InvalidParametersError,
    LookupServiceError,
    MissingParametersError,
    ReshapeError,
)
from ssm_param_resolver.core.models import LookupResult, ParameterType
from ssm_param_resolver.core.resolution import resolver as resolver_module
from ssm_param_resolver.core.resolution.resolver import (
    ParameterResolver,
    resolve,
    resolve_secure_string,
    resolve_secure_string_for_string_list,
)
from tests.fixtures import FakeParameterStore, make_parameter


@pytest.fixture
def resolver(fake_store):
    return ParameterResolver(fake_store.get_parameters)


class TestResolve:
    """Test resolution of strings and lists."""

    def test_scalar_example(self):
        """db={{ssm:/app/db/host}} resolves to db=10.0.0.5."""
        store = FakeParameterStore({"/app/db/host": "10.0.0.5"})
        assert ParameterResolver(store.get_parameters).resolve("db={{ssm:/app/db/host}}") == "db=10.0.0.5"

    def test_list_example(self):
        """List elements are resolved in place."""
        store = FakeParameterStore({"/a": "1", "/b": "2"})
        result = ParameterResolver(store.get_parameters).resolve(["{{ssm:/a}}", "plain", "{{ ssm:/b }}"])
        assert result == ["1", "plain", "2"]

    def test_secure_string_left_unresolved_by_default(self):
        """SecureString references stay verbatim without an error."""
        store = FakeParameterStore({"/secret": ("pw", ParameterType.SECURE_STRING)})
        assert ParameterResolver(store.get_parameters).resolve("{{ssm:/secret}}") == "{{ssm:/secret}}"

    def test_secure_string_resolved_on_request(self, resolver):
        result = resolver.resolve("pw={{ ssm:/app/db/password }}", resolve_secure_string=True)
        assert result == "pw=s3cr3t"

    def test_partial_resolution_with_secrets(self, resolver):
        """Plain references resolve while secure ones stay as written."""
        text = "{{ssm:/app/db/host}}:{{ssm:/app/db/port}} {{ssm:/app/db/password}}"
        assert resolver.resolve(text) == "10.0.0.5:5432 {{ssm:/app/db/password}}"

    def test_every_occurrence_replaced(self, resolver):
        """No reference syntax remains when everything is resolvable."""
        text = "{{ssm:/app/db/host}} {{ ssm:/app/db/host }} {{ssm:/app/hosts}}"
        result = resolver.resolve(text)
        assert result == "10.0.0.5 10.0.0.5 a.example.com,b.example.com"
        assert "{{" not in result

    def test_no_references_returns_input_without_lookup(self, fake_store, resolver):
        """Input without references is returned as-is and the store is not called."""
        value = "nothing to see {{ here }}"
        assert resolver.resolve(value) is value
        assert fake_store.calls == []

    def test_idempotent(self, fake_store, resolver):
        """Resolving a fully resolved value again changes nothing."""
        once = resolver.resolve(["{{ssm:/app/db/host}}", "{{ssm:/app/db/port}}"])
        twice = resolver.resolve(once)
        assert twice == once
        assert len(fake_store.calls) == 1

    def test_unsupported_shape_passes_through(self, fake_store, resolver):
        value = {"host": "{{ssm:/app/db/host}}"}
        assert resolver.resolve(value) is value
        assert fake_store.calls == []

    def test_tuple_in_tuple_out(self, resolver):
        assert resolver.resolve(("{{ssm:/app/db/port}}", "x")) == ("5432", "x")

    def test_no_cache_between_calls(self, fake_store, resolver):
        """Each call performs its own lookup."""
        resolver.resolve("{{ssm:/app/db/host}}")
        resolver.resolve("{{ssm:/app/db/host}}")
        assert fake_store.calls == [["/app/db/host"], ["/app/db/host"]]

    def test_empty_list(self, resolver):
        assert resolver.resolve([]) == []


class TestResolveErrors:
    """Test failures carry the original input."""

    def test_invalid_parameter_fails_with_original_input(self, resolver):
        value = ["{{ssm:/app/db/host}}", "{{ssm:/missing}}"]

        with pytest.raises(InvalidParametersError) as exc_info:
            resolver.resolve(value)

        assert exc_info.value.invalid_names == ["/missing"]
        assert exc_info.value.original_input is value
        assert value == ["{{ssm:/app/db/host}}", "{{ssm:/missing}}"]

    def test_dropped_names_fail(self):
        """Fewer results than names without an explanation is an error."""
        store = FakeParameterStore({"/a": "1"}, drop_names=["/b"])

        with pytest.raises(MissingParametersError) as exc_info:
            ParameterResolver(store.get_parameters).resolve("{{ssm:/a}}{{ssm:/b}}")

        assert exc_info.value.original_input == "{{ssm:/a}}{{ssm:/b}}"

    def test_repeated_invalid_name_tolerated(self):
        """A name reported invalid twice is still left unresolved, not an error."""
        parameter = make_parameter("/a", "1")
        lookup = MagicMock(return_value=LookupResult({"/a": parameter}, ["/b", "/b"]))

        resolver = ParameterResolver(lookup, tolerate_invalid=True)

        assert resolver.resolve("{{ssm:/a}} {{ssm:/b}}") == "1 {{ssm:/b}}"

    def test_name_returned_and_reported_invalid_fails(self):
        """A contradictory store response raises a resolution error with the original input."""
        lookup = MagicMock(
            return_value=LookupResult({"/a": make_parameter("/a", "1"), "/b": make_parameter("/b", "2")}, ["/b"])
        )

        with pytest.raises(InvalidParametersError) as exc_info:
            ParameterResolver(lookup, tolerate_invalid=True).resolve("{{ssm:/a}} {{ssm:/b}}")

        assert exc_info.value.invalid_names == ["/b"]
        assert exc_info.value.original_input == "{{ssm:/a}} {{ssm:/b}}"

    def test_tolerate_invalid_leaves_reference(self, fake_store):
        resolver = ParameterResolver(fake_store.get_parameters, tolerate_invalid=True)
        assert resolver.resolve("{{ssm:/app/db/port}} {{ssm:/missing}}") == "5432 {{ssm:/missing}}"

    def test_lookup_failure(self):
        resolver = ParameterResolver(MagicMock(side_effect=RuntimeError("boom")))

        with pytest.raises(LookupServiceError) as exc_info:
            resolver.resolve("{{ssm:/a}}")

        assert exc_info.value.original_input == "{{ssm:/a}}"


class TestSecureStringWrappers:
    """Test the typed convenience wrappers."""

    def test_resolve_secure_string(self, resolver):
        assert resolver.resolve_secure_string("{{ssm:/app/db/password}}") == "s3cr3t"

    def test_resolve_secure_string_list(self, resolver):
        result = resolver.resolve_secure_string_list(["{{ssm:/app/db/password}}", "{{ssm:/app/db/host}}"])
        assert result == ["s3cr3t", "10.0.0.5"]

    def test_resolve_secure_string_rejects_list(self, resolver):
        with pytest.raises(ReshapeError) as exc_info:
            resolver.resolve_secure_string(["{{ssm:/app/db/host}}"])
        assert exc_info.value.original_input == ["{{ssm:/app/db/host}}"]

    def test_resolve_secure_string_list_rejects_string(self, resolver):
        with pytest.raises(ReshapeError) as exc_info:
            resolver.resolve_secure_string_list("{{ssm:/app/db/host}}")
        assert exc_info.value.original_input == "{{ssm:/app/db/host}}"

    def test_resolve_secure_string_list_from_tuple(self, resolver):
        assert resolver.resolve_secure_string_list(("{{ssm:/app/db/port}}",)) == ["5432"]


class TestModuleFunctions:
    """Test the functional API."""

    def test_resolve_with_explicit_lookup(self, fake_store):
        assert resolve("{{ssm:/app/db/port}}", lookup=fake_store.get_parameters) == "5432"

    def test_resolve_secure_string(self, fake_store):
        assert resolve_secure_string("{{ssm:/app/db/password}}", lookup=fake_store) == "s3cr3t"

    def test_resolve_secure_string_for_string_list(self, fake_store):
        result = resolve_secure_string_for_string_list(["{{ssm:/app/db/password}}"], lookup=fake_store)
        assert result == ["s3cr3t"]

    def test_default_lookup_built_from_config(self, fake_store):
        """Without a lookup the resolver is created from configuration."""
        with patch.object(
            resolver_module.ParameterResolver,
            "create_from_config",
            return_value=ParameterResolver(fake_store.get_parameters),
        ) as mock_create:
            assert resolve("{{ssm:/app/db/host}}") == "10.0.0.5"

        mock_create.assert_called_once_with()

    def test_create_from_config(self, isolated_config):
        """create_from_config wires the boto3 client's get_parameters."""
        with patch("ssm_param_resolver.infrastructure.ssm.SSMParameterStoreClient") as mock_client_cls:
            resolver = ParameterResolver.create_from_config()

        assert resolver.coordinator.lookup is mock_client_cls.return_value.get_parameters
        assert resolver.coordinator.tolerate_invalid is False
