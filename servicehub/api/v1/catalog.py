from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from servicehub.api.v1.schemas import (
    CatalogMetricsSchema,
    CategorySummarySchema,
    ServiceCountSchema,
    ServiceEntrySchema,
    ServiceSchema,
    ServiceSearchResultSchema,
    SubCategorySummarySchema,
)
from servicehub.application.ports.service_catalog import ServiceCatalogPort
from servicehub.wiring.dependencies import get_service_catalog


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/categories", response_model=list[CategorySummarySchema])
def list_categories(catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    return [
        CategorySummarySchema(
            id=category.id,
            name=category.name,
            description=category.description,
            icon=category.icon,
            sub_categories=[
                SubCategorySummarySchema(
                    id=sub.id,
                    name=sub.name,
                    description=sub.description,
                    service_count=len(sub.services),
                )
                for sub in category.sub_categories
            ],
        )
        for category in catalog.list_categories()
    ]


@router.get("/categories/{category_id}/services", response_model=list[ServiceEntrySchema])
def services_by_category(category_id: str, catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    return [ServiceEntrySchema.from_entity(e) for e in catalog.get_services_by_category(category_id)]


@router.get("/services", response_model=list[ServiceEntrySchema])
def all_services(catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    return [ServiceEntrySchema.from_entity(e) for e in catalog.get_all_services()]


@router.get("/services/count", response_model=ServiceCountSchema)
def service_count(catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    return ServiceCountSchema(count=catalog.get_service_count())


@router.get("/services/{service_id}", response_model=ServiceSchema)
def get_service(service_id: str, catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    service = catalog.find_service_by_id(service_id)
    if not service:
        raise HTTPException(status_code=404, detail=f"Service {service_id!r} not found")
    return ServiceSchema.from_entity(service)


@router.get("/search", response_model=list[ServiceSearchResultSchema])
def search(
    q: str = Query(..., min_length=1),
    catalog: ServiceCatalogPort = Depends(get_service_catalog),
):
    results = catalog.search_services(q)
    logger.info("Catalog search", extra={"query": q, "result_count": len(results)})
    return [ServiceSearchResultSchema.from_entity(r) for r in results]


@router.get("/metrics", response_model=CatalogMetricsSchema)
def metrics(catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    m = catalog.calculate_metrics()
    return CatalogMetricsSchema(
        total_services=m.total_services,
        services_per_category=m.services_per_category,
        average_price=m.average_price,
    )
