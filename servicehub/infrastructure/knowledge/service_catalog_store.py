from __future__ import annotations

from collections.abc import Iterator

from servicehub.application.ports.service_catalog import ServiceCatalogPort
from servicehub.domain.entities.catalog import (
    CatalogMetrics,
    Category,
    Service,
    ServiceEntry,
    ServiceSearchResult,
    SubCategory,
)
from servicehub.infrastructure.knowledge.catalog_loader import load_catalog


NAME_WEIGHT = 3
DESCRIPTION_WEIGHT = 2
EXPERTISE_WEIGHT = 1


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(self, categories: list[Category] | None = None) -> None:
        self._categories = list(categories) if categories is not None else load_catalog()

    def list_categories(self) -> list[Category]:
        return list(self._categories)

    def get_category(self, category_id: str) -> Category | None:
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    def get_service_count(self) -> int:
        return sum(len(sub.services) for category in self._categories for sub in category.sub_categories)

    def get_all_services(self) -> list[ServiceEntry]:
        return list(self._iter_entries(self._categories))

    def get_services_by_category(self, category_id: str) -> list[ServiceEntry]:
        category = self.get_category(category_id)
        if not category:
            return []
        return list(self._iter_entries([category]))

    def search_services(self, query: str) -> list[ServiceSearchResult]:
        normalized_query = (query or "").lower()
        results: list[ServiceSearchResult] = []

        for entry in self._iter_entries(self._categories):
            service = entry.service
            relevance = 0
            if normalized_query in service.name.lower():
                relevance += NAME_WEIGHT
            if normalized_query in service.description.lower():
                relevance += DESCRIPTION_WEIGHT
            if any(normalized_query in expertise.lower() for expertise in service.expertise):
                relevance += EXPERTISE_WEIGHT

            if relevance > 0:
                results.append(
                    ServiceSearchResult(
                        category_id=entry.category_id,
                        sub_category_id=entry.sub_category_id,
                        service=service,
                        relevance=relevance,
                    )
                )

        # sorted() is stable: equal relevance keeps catalog order
        return sorted(results, key=lambda r: -r.relevance)

    def find_service_by_id(self, service_id: str) -> Service | None:
        for entry in self._iter_entries(self._categories):
            if entry.service.id == service_id:
                return entry.service
        return None

    def find_sub_category_by_id(self, sub_category_id: str) -> SubCategory | None:
        for category in self._categories:
            for sub in category.sub_categories:
                if sub.id == sub_category_id:
                    return sub
        return None

    def filter_services_by_expertise(self, expertise: str) -> list[ServiceEntry]:
        return [e for e in self._iter_entries(self._categories) if expertise in e.service.expertise]

    def get_services_by_frequency(self, frequency: str) -> list[ServiceEntry]:
        return [e for e in self._iter_entries(self._categories) if e.service.frequency == frequency]

    def calculate_metrics(self) -> CatalogMetrics:
        services_per_category: dict[str, int] = {}
        total_price = 0.0
        price_count = 0

        for category in self._categories:
            services_per_category[category.name] = 0
            for sub in category.sub_categories:
                services_per_category[category.name] += len(sub.services)
                for service in sub.services:
                    total_price += (service.price_range.min + service.price_range.max) / 2
                    price_count += 1

        return CatalogMetrics(
            total_services=price_count,
            services_per_category=services_per_category,
            average_price=total_price / price_count if price_count else 0.0,
        )

    @staticmethod
    def _iter_entries(categories: list[Category]) -> Iterator[ServiceEntry]:
        for category in categories:
            for sub in category.sub_categories:
                for service in sub.services:
                    yield ServiceEntry(category_id=category.id, sub_category_id=sub.id, service=service)


def get_compliance_requirements(service: Service) -> tuple[str, ...]:
    return service.compliance or ()


def get_required_certifications(service: Service) -> tuple[str, ...]:
    return service.certifications or ()
