"""Entity clients for registration domains (contacts, companies, warehouses...)."""

from bling_connector.core.models import EntityDomain, UnsupportedOperationError
from .base import Entity


class Contatos(Entity):
    """Contacts (customers, suppliers, carriers)."""
    domain = EntityDomain.CONTATOS
    endpoint = "/contatos"


class ContatosTipos(Entity):
    """Contact types. Read-only on the Bling side."""
    domain = EntityDomain.CONTATOS_TIPOS
    endpoint = "/contatos/tipos"
    read_only = True


class Empresas(Entity):
    """
    Basic data of the authenticated company.

    The endpoint is a single resource: use find_all() to read it.
    """
    domain = EntityDomain.EMPRESAS
    endpoint = "/empresas/me/dados-basicos"
    read_only = True

    def find(self, resource_id, params=None):
        raise UnsupportedOperationError(
            "'empresas' has no records by ID; use find_all() for the company data"
        )


class Depositos(Entity):
    domain = EntityDomain.DEPOSITOS
    endpoint = "/depositos"


class FormasDePagamento(Entity):
    domain = EntityDomain.FORMAS_DE_PAGAMENTO
    endpoint = "/formas-pagamentos"


class CamposCustomizados(Entity):
    domain = EntityDomain.CAMPOS_CUSTOMIZADOS
    endpoint = "/campos-customizados"


class Contratos(Entity):
    domain = EntityDomain.CONTRATOS
    endpoint = "/contratos"
