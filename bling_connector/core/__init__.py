"""Core components for the Bling connector."""

from .models import (
    DEFAULT_BASE_URL,
    EntityDomain,
    ClientSettings,
    BlingError,
    ConfigurationError,
    EntityConstructionError,
    UnknownDomainError,
    UnsupportedOperationError,
    ReadOnlyEntityError,
    APIError,
    parse_domain,
)
from .registry import ModuleRegistry
from .config_store import (
    get_base_dir,
    settings_path,
    save_json,
    load_json,
    validate_settings,
    load_settings,
    load_saved_settings,
    save_settings,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "EntityDomain",
    "ClientSettings",
    "BlingError",
    "ConfigurationError",
    "EntityConstructionError",
    "UnknownDomainError",
    "UnsupportedOperationError",
    "ReadOnlyEntityError",
    "APIError",
    "parse_domain",
    "ModuleRegistry",
    "get_base_dir",
    "settings_path",
    "save_json",
    "load_json",
    "validate_settings",
    "load_settings",
    "load_saved_settings",
    "save_settings",
]
