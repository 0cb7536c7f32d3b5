"""Registry access exports."""

from .registry_client import RegistryClient, sort_schemas_by_name
from .registry_errors import RegistryAccessError, RegistryConnectionError, UnexpectedResponseError

__all__ = [
    "RegistryClient",
    "sort_schemas_by_name",
    "RegistryAccessError",
    "RegistryConnectionError",
    "UnexpectedResponseError",
]
