"""Entity clients for stock and product approval domains."""

from bling_connector.core.models import EntityDomain
from .base import Entity


class Estoques(Entity):
    """Stock entries and balances per warehouse."""
    domain = EntityDomain.ESTOQUES
    endpoint = "/estoques"


class Homologacao(Entity):
    """
    Sandbox product flow used when approving an integration.

    Read-only from the connector's point of view.
    """
    domain = EntityDomain.HOMOLOGACAO
    endpoint = "/homologacao/produtos"
    read_only = True
