"""
Test Fixtures for ssm-param-resolver

In-memory stand-ins for AWS Systems Manager Parameter Store.

## Usage

```python
from tests.fixtures import FakeParameterStore

store = FakeParameterStore({"/app/db/host": "10.0.0.5"})
resolver = ParameterResolver(lookup=store.get_parameters)
```
"""

from tests.fixtures.parameter_store import FakeParameterStore, make_parameter

__all__ = ["FakeParameterStore", "make_parameter"]
