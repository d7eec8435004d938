"""Core data models and errors for the Bling connector."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_BASE_URL = "https://www.bling.com.br/Api/v3"


class EntityDomain(Enum):
    """
    Resource domains exposed by the Bling API.

    The value of each member is the name of the accessor on the facade
    and the key used by the module registry.
    """
    BORDEROS = "borderos"
    CAMPOS_CUSTOMIZADOS = "campos_customizados"
    CATEGORIAS_LOJAS = "categorias_lojas"
    CATEGORIAS_PRODUTOS = "categorias_produtos"
    CATEGORIAS_RECEITAS_DESPESAS = "categorias_receitas_despesas"
    CONTAS_CONTABEIS = "contas_contabeis"
    CONTAS_PAGAR = "contas_pagar"
    CONTAS_RECEBER = "contas_receber"
    CONTATOS = "contatos"
    CONTATOS_TIPOS = "contatos_tipos"
    CONTRATOS = "contratos"
    DEPOSITOS = "depositos"
    EMPRESAS = "empresas"
    ESTOQUES = "estoques"
    FORMAS_DE_PAGAMENTO = "formas_de_pagamento"
    HOMOLOGACAO = "homologacao"


@dataclass
class ClientSettings:
    """Connection settings shared by every request of a repository."""
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0
    max_retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert ClientSettings to a dictionary."""
        return {
            "base_url": self.base_url,
            "timeout_seconds": self.timeout_seconds,
            "max_retries": self.max_retries,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClientSettings":
        """
        Create ClientSettings from a dictionary, keeping defaults for missing keys.

        Raises:
            TypeError: If base_url is not a string
            ValueError: If a numeric field cannot be converted
        """
        defaults = cls()
        base_url = data.get("base_url", defaults.base_url)
        if not isinstance(base_url, str) or not base_url.strip():
            raise TypeError(f"base_url must be a non-empty string, got {base_url!r}")

        return cls(
            base_url=base_url,
            timeout_seconds=float(data.get("timeout_seconds", defaults.timeout_seconds)),
            max_retries=int(data.get("max_retries", defaults.max_retries)),
        )


class BlingError(Exception):
    """Base class for every error raised by the connector."""
    pass


class ConfigurationError(BlingError):
    """Raised when the connector cannot be configured (token or settings)."""
    pass


class EntityConstructionError(BlingError):
    """Raised when an entity client fails to build."""

    def __init__(self, message: str, domain: EntityDomain | None = None):
        super().__init__(message)
        self.domain = domain


class UnknownDomainError(BlingError):
    """Raised when a domain name does not match any EntityDomain."""
    pass


class UnsupportedOperationError(BlingError):
    """Raised when a domain does not offer the requested operation."""
    pass


class ReadOnlyEntityError(UnsupportedOperationError):
    """Raised when a write operation is attempted on a read-only domain."""
    pass


class APIError(BlingError):
    """Raised when an API request fails after retries."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_type: str | None = None,
        description: str | None = None,
        fields: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type
        self.description = description
        self.fields = fields or []


def parse_domain(name: "str | EntityDomain") -> EntityDomain:
    """
    Resolve a domain from its accessor name.

    Accepts the EntityDomain itself, its value ("contas_pagar") or the
    dashed form used on the command line ("contas-pagar").

    Raises:
        UnknownDomainError: If the name matches no domain
    """
    if isinstance(name, EntityDomain):
        return name

    normalized = str(name).strip().lower().replace("-", "_")
    try:
        return EntityDomain(normalized)
    except ValueError:
        supported = ", ".join(d.value for d in EntityDomain)
        raise UnknownDomainError(
            f"Unknown domain '{name}'. Supported domains: {supported}"
        ) from None
