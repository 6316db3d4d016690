from __future__ import annotations

from abc import ABC, abstractmethod

from servicehub.domain.entities.catalog import (
    CatalogMetrics,
    Category,
    Service,
    ServiceEntry,
    ServiceSearchResult,
    SubCategory,
)


class ServiceCatalogPort(ABC):
    @abstractmethod
    def list_categories(self) -> list[Category]:
        """Categories in registration order."""
        raise NotImplementedError

    @abstractmethod
    def get_category(self, category_id: str) -> Category | None:
        raise NotImplementedError

    @abstractmethod
    def get_service_count(self) -> int:
        """Total number of services across all categories and subcategories."""
        raise NotImplementedError

    @abstractmethod
    def get_all_services(self) -> list[ServiceEntry]:
        """Flat list of services in category, subcategory, service order."""
        raise NotImplementedError

    @abstractmethod
    def get_services_by_category(self, category_id: str) -> list[ServiceEntry]:
        """Services of one category. Returns [] if the category is unknown."""
        raise NotImplementedError

    @abstractmethod
    def search_services(self, query: str) -> list[ServiceSearchResult]:
        """Relevance-ranked case-insensitive substring search."""
        raise NotImplementedError

    @abstractmethod
    def find_service_by_id(self, service_id: str) -> Service | None:
        raise NotImplementedError

    @abstractmethod
    def find_sub_category_by_id(self, sub_category_id: str) -> SubCategory | None:
        raise NotImplementedError

    @abstractmethod
    def filter_services_by_expertise(self, expertise: str) -> list[ServiceEntry]:
        raise NotImplementedError

    @abstractmethod
    def get_services_by_frequency(self, frequency: str) -> list[ServiceEntry]:
        raise NotImplementedError

    @abstractmethod
    def calculate_metrics(self) -> CatalogMetrics:
        raise NotImplementedError
