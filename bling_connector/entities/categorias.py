"""Entity clients for category domains."""

from bling_connector.core.models import EntityDomain
from .base import Entity


class CategoriasLojas(Entity):
    """Product categories as mapped to each store."""
    domain = EntityDomain.CATEGORIAS_LOJAS
    endpoint = "/categorias/lojas"


class CategoriasProdutos(Entity):
    domain = EntityDomain.CATEGORIAS_PRODUTOS
    endpoint = "/categorias/produtos"


class CategoriasReceitasDespesas(Entity):
    """Revenue and expense categories. Read-only on the Bling side."""
    domain = EntityDomain.CATEGORIAS_RECEITAS_DESPESAS
    endpoint = "/categorias/receitas-despesas"
    read_only = True
