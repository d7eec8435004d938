"""Entity clients, one per Bling resource domain."""

from bling_connector.core.models import EntityDomain
from .base import Entity
from .cadastros import (
    CamposCustomizados,
    Contatos,
    ContatosTipos,
    Contratos,
    Depositos,
    Empresas,
    FormasDePagamento,
)
from .categorias import CategoriasLojas, CategoriasProdutos, CategoriasReceitasDespesas
from .estoques import Estoques, Homologacao
from .financeiro import Borderos, ContasContabeis, ContasPagar, ContasReceber

ENTITY_CLASSES: dict[EntityDomain, type[Entity]] = {
    cls.domain: cls
    for cls in (
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
        Estoques,
        FormasDePagamento,
        Homologacao,
    )
}

__all__ = [
    "ENTITY_CLASSES",
    "Entity",
    "Borderos",
    "CamposCustomizados",
    "CategoriasLojas",
    "CategoriasProdutos",
    "CategoriasReceitasDespesas",
    "ContasContabeis",
    "ContasPagar",
    "ContasReceber",
    "Contatos",
    "ContatosTipos",
    "Contratos",
    "Depositos",
    "Empresas",
    "Estoques",
    "FormasDePagamento",
    "Homologacao",
]
