"""Base class for entity clients."""

from typing import Any, ClassVar

from bling_connector.core.models import EntityDomain, ReadOnlyEntityError
from bling_connector.repository import BlingRepository


class Entity:
    """
    Base class for the per-domain entity clients.

    Each domain of the Bling API (contatos, depositos, ...) has its own
    subclass declaring its domain and endpoint. Entities borrow the
    repository of the facade that built them and never close it.
    """

    domain: ClassVar[EntityDomain]
    endpoint: ClassVar[str]
    read_only: ClassVar[bool] = False

    def __init__(self, repository: BlingRepository):
        """
        Initialize the entity with the shared repository.

        Args:
            repository: Authenticated transport owned by the facade
        """
        self.repository = repository

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self.endpoint!r})"

    def _ensure_writable(self, operation: str) -> None:
        if self.read_only:
            raise ReadOnlyEntityError(
                f"'{self.domain.value}' does not support {operation}"
            )

    def find_all(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        List records of this domain.

        Args:
            params: Optional query parameters (e.g. pagina, limite, filters)

        Returns:
            Response body, records under "data"
        """
        return self.repository.index(self.endpoint, params=params)

    def find(self, resource_id: int | str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Get a single record by ID."""
        return self.repository.show(self.endpoint, resource_id, params=params)

    def create(self, body: dict[str, Any]) -> dict[str, Any]:
        """
        Create a record.

        Raises:
            ReadOnlyEntityError: If the domain is read-only
        """
        self._ensure_writable("create")
        return self.repository.store(self.endpoint, body)

    def update(self, resource_id: int | str, body: dict[str, Any]) -> dict[str, Any]:
        """
        Replace a record.

        Raises:
            ReadOnlyEntityError: If the domain is read-only
        """
        self._ensure_writable("update")
        return self.repository.update(self.endpoint, resource_id, body)

    def patch(self, resource_id: int | str, body: dict[str, Any]) -> dict[str, Any]:
        """
        Change some fields of a record.

        Raises:
            ReadOnlyEntityError: If the domain is read-only
        """
        self._ensure_writable("patch")
        return self.repository.modify(self.endpoint, resource_id, body)

    def delete(self, resource_id: int | str) -> dict[str, Any]:
        """
        Delete a record.

        Raises:
            ReadOnlyEntityError: If the domain is read-only
        """
        self._ensure_writable("delete")
        return self.repository.destroy(self.endpoint, resource_id)
