"""
Unit tests for the SecureString filter.
"""

from ssm_param_resolver.core.models import ParameterType
from ssm_param_resolver.core.resolution.secrets import filter_secure_parameters
from tests.fixtures import make_parameter

PLAIN = make_parameter("/plain", "1")
LIST = make_parameter("/list", "a,b", ParameterType.STRING_LIST)
SECRET = make_parameter("/secret", "hunter2", ParameterType.SECURE_STRING)


class TestFilterSecureParameters:
    def test_secure_dropped_by_default(self):
        """SecureString parameters are removed when secrets are not requested."""
        assert filter_secure_parameters([PLAIN, SECRET, LIST], False) == [PLAIN, LIST]

    def test_secure_kept_when_requested(self):
        """All parameters pass when secrets are requested."""
        assert filter_secure_parameters([PLAIN, SECRET, LIST], True) == [PLAIN, SECRET, LIST]

    def test_accepts_dict_values(self):
        """Any iterable of parameters is accepted."""
        params = {SECRET.name: SECRET, PLAIN.name: PLAIN}
        assert filter_secure_parameters(params.values(), False) == [PLAIN]
