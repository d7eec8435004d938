"""Client-side connector for the Bling ERP API."""

from .bling import Bling
from .core import (
    EntityDomain,
    ClientSettings,
    BlingError,
    ConfigurationError,
    EntityConstructionError,
    UnknownDomainError,
    UnsupportedOperationError,
    ReadOnlyEntityError,
    APIError,
)
from .repository import BlingRepository

__all__ = [
    "Bling",
    "BlingRepository",
    "EntityDomain",
    "ClientSettings",
    "BlingError",
    "ConfigurationError",
    "EntityConstructionError",
    "UnknownDomainError",
    "UnsupportedOperationError",
    "ReadOnlyEntityError",
    "APIError",
]
