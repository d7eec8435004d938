"""Module registry that builds and caches entity clients per facade."""

import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from .models import EntityDomain, EntityConstructionError, UnknownDomainError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Factory = Callable[[Any], Any]


class ModuleRegistry:
    """
    Lazily builds one entity client per domain and keeps it for the
    registry's lifetime.

    Every constructor receives the same repository. Entries are keyed by
    EntityDomain and are never replaced or evicted once stored. A failed
    construction leaves no entry behind, so the next resolve retries.
    """

    def __init__(
        self,
        repository: Any,
        factories: Mapping[EntityDomain, Factory] | None = None,
    ):
        """
        Initialize an empty registry.

        Args:
            repository: Shared transport handed to every constructor
            factories: Default constructor per domain, used when resolve()
                       is called without an explicit constructor
        """
        self._repository = repository
        self._factories: dict[EntityDomain, Factory] = dict(factories or {})
        self._modules: dict[EntityDomain, Any] = {}
        # Re-entrant so a constructor may resolve another domain.
        self._lock = threading.RLock()

    def resolve(
        self,
        domain: EntityDomain,
        constructor: Callable[[Any], T] | None = None,
    ) -> T:
        """
        Return the entity client for a domain, building it on first use.

        Args:
            domain: Domain identity used as the cache key
            constructor: Callable taking the repository; defaults to the
                         factory registered for the domain

        Returns:
            The cached or newly built entity client

        Raises:
            UnknownDomainError: If no constructor is given or registered
            EntityConstructionError: If the constructor fails
        """
        with self._lock:
            if domain in self._modules:
                return self._modules[domain]

            if constructor is None:
                constructor = self._factories.get(domain)
            if constructor is None:
                raise UnknownDomainError(f"No factory registered for domain '{domain.value}'")

            try:
                module = constructor(self._repository)
            except EntityConstructionError:
                raise
            except Exception as e:
                raise EntityConstructionError(
                    f"Failed to build entity client for '{domain.value}': {e}",
                    domain=domain,
                ) from e

            self._modules[domain] = module
            logger.debug(f"Built {type(module).__name__} for domain '{domain.value}'")
            return module

    def is_resolved(self, domain: EntityDomain) -> bool:
        """Return True if the domain already has a cached entity client."""
        return domain in self._modules

    def resolved(self) -> list[EntityDomain]:
        """
        List the domains resolved so far.

        Returns:
            Snapshot of resolved domains sorted by value
        """
        with self._lock:
            return sorted(self._modules, key=lambda d: d.value)

    def __contains__(self, domain: object) -> bool:
        return domain in self._modules

    def __len__(self) -> int:
        return len(self._modules)
