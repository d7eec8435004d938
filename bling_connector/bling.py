"""
Bling facade

Entry point of the connector: builds the repository from an access token
and serves one entity client per domain through the module registry.

Example:
    >>> bling = Bling("your-access-token")
    >>> bling.contatos.find_all({"pagina": 1})
    >>> bling.close()
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar, overload

import httpx

from .core.models import ClientSettings, EntityDomain, parse_domain
from .core.registry import ModuleRegistry
from .entities import (
    ENTITY_CLASSES,
    Borderos,
    CamposCustomizados,
    CategoriasLojas,
    CategoriasProdutos,
    CategoriasReceitasDespesas,
    ContasContabeis,
    ContasPagar,
    ContasReceber,
    Contatos,
    ContatosTipos,
    Contratos,
    Depositos,
    Empresas,
    Entity,
    Estoques,
    FormasDePagamento,
    Homologacao,
)
from .repository import BlingRepository

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class _Module(Generic[E]):
    """Read-only accessor resolving one entity class through the facade's registry."""

    def __init__(self, entity_class: type[E]):
        self.entity_class = entity_class
        self.domain = entity_class.domain

    def __set_name__(self, owner: type, name: str) -> None:
        if name != self.domain.value:
            raise TypeError(
                f"Accessor '{name}' does not match domain '{self.domain.value}'"
            )

    @overload
    def __get__(self, instance: None, owner: type) -> "_Module[E]": ...

    @overload
    def __get__(self, instance: "Bling", owner: type) -> E: ...

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance._registry.resolve(self.domain)

    def __set__(self, instance: "Bling", value: Any) -> None:
        raise AttributeError(f"'{self.domain.value}' is read-only")


class Bling:
    """
    Connector to the Bling API.

    Each domain accessor returns the same entity client for the lifetime
    of the instance; clients are built on first access only.
    """

    borderos = _Module(Borderos)
    campos_customizados = _Module(CamposCustomizados)
    categorias_lojas = _Module(CategoriasLojas)
    categorias_produtos = _Module(CategoriasProdutos)
    categorias_receitas_despesas = _Module(CategoriasReceitasDespesas)
    contas_contabeis = _Module(ContasContabeis)
    contas_pagar = _Module(ContasPagar)
    contas_receber = _Module(ContasReceber)
    contatos = _Module(Contatos)
    contatos_tipos = _Module(ContatosTipos)
    contratos = _Module(Contratos)
    depositos = _Module(Depositos)
    empresas = _Module(Empresas)
    estoques = _Module(Estoques)
    formas_de_pagamento = _Module(FormasDePagamento)
    homologacao = _Module(Homologacao)

    def __init__(
        self,
        access_token: str,
        settings: ClientSettings | None = None,
        factories: Mapping["EntityDomain | str", Callable[[BlingRepository], Entity]] | None = None,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the connector.

        Args:
            access_token: Bling OAuth access token
            settings: Connection settings (defaults if None)
            factories: Optional constructor overrides, keyed by EntityDomain
                       or accessor name
            http_client: Optional httpx client handed to the repository

        Raises:
            ConfigurationError: If the repository cannot be built from the token
            UnknownDomainError: If a factory key matches no domain
        """
        table: dict[EntityDomain, Callable[[BlingRepository], Entity]] = dict(ENTITY_CLASSES)
        for domain, factory in (factories or {}).items():
            table[parse_domain(domain)] = factory

        self._repository = BlingRepository(access_token, settings=settings, http_client=http_client)
        self._registry = ModuleRegistry(self._repository, table)

        logger.debug(f"Bling connector ready ({self._repository.settings.base_url})")

    @property
    def repository(self) -> BlingRepository:
        """The repository shared by every entity client."""
        return self._repository

    def get_module(self, domain: "EntityDomain | str") -> Entity:
        """
        Get an entity client by domain.

        Args:
            domain: EntityDomain or its accessor name (e.g. "contas_pagar")

        Returns:
            The entity client for the domain

        Raises:
            UnknownDomainError: If the name matches no domain
            EntityConstructionError: If the entity client fails to build
        """
        return self._registry.resolve(parse_domain(domain))

    def loaded_modules(self) -> list[EntityDomain]:
        """List the domains whose entity clients were already built."""
        return self._registry.resolved()

    def close(self) -> None:
        """Close the repository's HTTP client."""
        self._repository.close()

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager cleanup."""
        self.close()
        return False
