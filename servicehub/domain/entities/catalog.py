from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PriceRange:
    min: int
    max: int


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    description: str
    estimated_duration: str  # free text, e.g. "2-4 hours"
    price_range: PriceRange
    expertise: tuple[str, ...]
    materials: tuple[str, ...]
    frequency: str
    compliance: tuple[str, ...] | None = None
    certifications: tuple[str, ...] | None = None


@dataclass(frozen=True)
class SubCategory:
    id: str
    name: str
    description: str
    services: tuple[Service, ...] = ()


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    description: str
    icon: str
    sub_categories: tuple[SubCategory, ...] = ()


@dataclass(frozen=True)
class ServiceEntry:
    category_id: str
    sub_category_id: str
    service: Service


@dataclass(frozen=True)
class ServiceSearchResult:
    category_id: str
    sub_category_id: str
    service: Service
    relevance: int


@dataclass(frozen=True)
class CatalogMetrics:
    total_services: int
    services_per_category: dict[str, int]
    average_price: float
