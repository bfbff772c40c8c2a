"""
Credential value types.

ClientId, ClientSecret and ApiToken wrap a plain string so that a secret can
not be passed where an id is expected. No format validation happens here;
the API is the only judge of a credential.
"""

from typing import Any


class _Credential:
    """Immutable string wrapper compared by type and value."""

    __slots__ = ('_value',)
    _masked = False

    def __init__(self, value: Any):
        object.__setattr__(self, '_value', str(value))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        shown = '***' if self._masked else self._value
        return f"{type(self).__name__}({shown!r})"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))


class ClientId(_Credential):
    """A client ID as shown in the Eversend business dashboard."""
    __slots__ = ()


class ClientSecret(_Credential):
    """A client secret as shown in the Eversend business dashboard."""
    __slots__ = ()
    _masked = True


class ApiToken(_Credential):
    """A bearer token used to authenticate with the Eversend API."""
    __slots__ = ()
    _masked = True
