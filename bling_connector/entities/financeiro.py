"""Entity clients for financial domains."""

from bling_connector.core.models import EntityDomain
from .base import Entity


class ContasPagar(Entity):
    """Accounts payable."""
    domain = EntityDomain.CONTAS_PAGAR
    endpoint = "/contas/pagar"


class ContasReceber(Entity):
    """Accounts receivable."""
    domain = EntityDomain.CONTAS_RECEBER
    endpoint = "/contas/receber"


class ContasContabeis(Entity):
    """Ledger accounts. Read-only on the Bling side."""
    domain = EntityDomain.CONTAS_CONTABEIS
    endpoint = "/contas-contabeis"
    read_only = True


class Borderos(Entity):
    """Payment batches generated when settling accounts."""
    domain = EntityDomain.BORDEROS
    endpoint = "/borderos"
