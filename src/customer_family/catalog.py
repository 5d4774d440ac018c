"""Read-only access to the customer family catalog.

The catalog itself is persisted by the host platform; this module only
defines the two queries the registration form needs, plus an in-memory
adapter for wiring and tests.
"""
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from customer_family.models import CustomerFamily, DataSourceError

logger = logging.getLogger("customer_family.catalog")


class CustomerFamilyCatalog(ABC):
    """Query interface over the customer family records."""

    @abstractmethod
    def find_all(self) -> List[CustomerFamily]:
        """Return every known family, in catalog order.

        Raises:
            DataSourceError: If the catalog cannot be queried.
        """

    @abstractmethod
    def count_by_code(self, code: str) -> int:
        """Return how many families carry exactly this code.

        Raises:
            DataSourceError: If the catalog cannot be queried.
        """


class InMemoryCustomerFamilyCatalog(CustomerFamilyCatalog):
    """Catalog backed by a list held in memory.

    ``fail_with`` makes every query raise, which lets callers exercise the
    catalog-outage path without a real backend.
    """

    def __init__(
        self,
        families: Optional[Iterable[CustomerFamily]] = None,
        fail_with: Optional[str] = None,
    ) -> None:
        self._families: List[CustomerFamily] = list(families or [])
        self._fail_with = fail_with

    def add(self, family: CustomerFamily) -> None:
        self._families.append(family)

    def find_all(self) -> List[CustomerFamily]:
        self._check_available()
        return list(self._families)

    def count_by_code(self, code: str) -> int:
        self._check_available()
        return sum(1 for family in self._families if family.code == code)

    def _check_available(self) -> None:
        if self._fail_with is not None:
            logger.debug("Catalog query refused: %s", self._fail_with)
            raise DataSourceError(self._fail_with)
