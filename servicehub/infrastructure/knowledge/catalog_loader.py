from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from servicehub.application.exceptions import CatalogDataError
from servicehub.application.utils.cost_parser import parse_cost_range
from servicehub.domain.entities.catalog import Category, PriceRange, Service, SubCategory
from servicehub.domain.entities.issue import (
    IssueCategory,
    IssueSubCategory,
    MaintenanceIssue,
    Season,
    Severity,
)


DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"
REGISTRY_FILE = "registry.json"
ISSUES_FILE = "issues.json"

logger = logging.getLogger(__name__)


class _Document(BaseModel):
    model_config = ConfigDict(extra="forbid")


class PriceRangeDocument(_Document):
    min: int = Field(ge=0)
    max: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "PriceRangeDocument":
        if self.min > self.max:
            raise ValueError(f"price_range min {self.min} exceeds max {self.max}")
        return self


class ServiceDocument(_Document):
    id: str = Field(min_length=1)
    name: str
    description: str
    estimated_duration: str
    price_range: PriceRangeDocument
    expertise: list[str]
    materials: list[str]
    frequency: str
    compliance: list[str] | None = None
    certifications: list[str] | None = None


class SubCategoryDocument(_Document):
    id: str = Field(min_length=1)
    name: str
    description: str
    services: list[ServiceDocument] = Field(default_factory=list)


class CategoryDocument(_Document):
    id: str = Field(min_length=1)
    name: str
    description: str
    icon: str
    sub_categories: list[SubCategoryDocument] = Field(default_factory=list)


class RegistryDocument(_Document):
    categories: list[str]


class IssueDocument(_Document):
    id: str = Field(min_length=1)
    title: str
    description: str
    severity: Severity
    estimated_time: str
    estimated_cost: str
    common_causes: list[str]
    preventive_measures: list[str]
    required_tools: list[str] | None = None
    professional_required: bool
    seasonal_relevance: list[Season] | None = None


class IssueSubCategoryDocument(_Document):
    id: str = Field(min_length=1)
    name: str
    description: str
    issues: list[IssueDocument] = Field(default_factory=list)


class IssueCategoryDocument(_Document):
    id: str = Field(min_length=1)
    name: str
    description: str
    sub_categories: list[IssueSubCategoryDocument] = Field(default_factory=list)


class IssuesDocument(_Document):
    categories: list[IssueCategoryDocument]


def load_catalog(data_dir: str | Path | None = None) -> list[Category]:
    """
    Load every category fragment listed in catalog/registry.json, in registry order.
    Raises CatalogDataError on schema violations or duplicate ids.
    """
    catalog_dir = Path(data_dir or DEFAULT_DATA_DIR) / "catalog"
    registry = _parse(RegistryDocument, catalog_dir / REGISTRY_FILE)

    documents = [_parse(CategoryDocument, catalog_dir / name) for name in registry.categories]
    categories = build_categories(documents, source=str(catalog_dir))
    logger.info(
        "Service catalog loaded",
        extra={"category_count": len(categories)},
    )
    return categories


def load_issue_categories(data_dir: str | Path | None = None) -> list[IssueCategory]:
    """Load the issue knowledge base from issues.json."""
    path = Path(data_dir or DEFAULT_DATA_DIR) / ISSUES_FILE
    document = _parse(IssuesDocument, path)
    return build_issue_categories(document.categories, source=str(path))


def build_categories(documents: list[CategoryDocument], source: str = "<memory>") -> list[Category]:
    _ensure_unique([doc.id for doc in documents], f"{source}: category")

    categories: list[Category] = []
    for doc in documents:
        _ensure_unique([sub.id for sub in doc.sub_categories], f"{source}: {doc.id} subcategory")
        sub_categories = []
        for sub in doc.sub_categories:
            _ensure_unique([svc.id for svc in sub.services], f"{source}: {doc.id}/{sub.id} service")
            sub_categories.append(
                SubCategory(
                    id=sub.id,
                    name=sub.name,
                    description=sub.description,
                    services=tuple(_to_service(svc) for svc in sub.services),
                )
            )
        categories.append(
            Category(
                id=doc.id,
                name=doc.name,
                description=doc.description,
                icon=doc.icon,
                sub_categories=tuple(sub_categories),
            )
        )
    return categories


def build_issue_categories(
    documents: list[IssueCategoryDocument],
    source: str = "<memory>",
) -> list[IssueCategory]:
    _ensure_unique([doc.id for doc in documents], f"{source}: issue category")
    _ensure_unique(
        [issue.id for doc in documents for sub in doc.sub_categories for issue in sub.issues],
        f"{source}: issue",
    )

    categories: list[IssueCategory] = []
    for doc in documents:
        _ensure_unique([sub.id for sub in doc.sub_categories], f"{source}: {doc.id} subcategory")
        sub_categories = []
        for sub in doc.sub_categories:
            issues = []
            for issue in sub.issues:
                try:
                    parse_cost_range(issue.estimated_cost)
                except ValueError as e:
                    raise CatalogDataError(f"{source}: {doc.id}/{sub.id}/{issue.id}: {e}") from e
                issues.append(_to_issue(issue))
            sub_categories.append(
                IssueSubCategory(
                    id=sub.id,
                    name=sub.name,
                    description=sub.description,
                    issues=tuple(issues),
                )
            )
        categories.append(
            IssueCategory(
                id=doc.id,
                name=doc.name,
                description=doc.description,
                sub_categories=tuple(sub_categories),
            )
        )
    return categories


def _parse(model: type[_Document], path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogDataError(f"{path}: cannot read data file ({e})") from e

    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise CatalogDataError(f"{path}: {e}") from e


def _ensure_unique(ids: list[str], scope: str) -> None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise CatalogDataError(f"{scope} id {item_id!r} is duplicated")
        seen.add(item_id)


def _optional_tuple(values: list[Any] | None) -> tuple[Any, ...] | None:
    return tuple(values) if values is not None else None


def _to_service(doc: ServiceDocument) -> Service:
    return Service(
        id=doc.id,
        name=doc.name,
        description=doc.description,
        estimated_duration=doc.estimated_duration,
        price_range=PriceRange(min=doc.price_range.min, max=doc.price_range.max),
        expertise=tuple(doc.expertise),
        materials=tuple(doc.materials),
        frequency=doc.frequency,
        compliance=_optional_tuple(doc.compliance),
        certifications=_optional_tuple(doc.certifications),
    )


def _to_issue(doc: IssueDocument) -> MaintenanceIssue:
    return MaintenanceIssue(
        id=doc.id,
        title=doc.title,
        description=doc.description,
        severity=doc.severity,
        estimated_time=doc.estimated_time,
        estimated_cost=doc.estimated_cost,
        common_causes=tuple(doc.common_causes),
        preventive_measures=tuple(doc.preventive_measures),
        professional_required=doc.professional_required,
        required_tools=_optional_tuple(doc.required_tools),
        seasonal_relevance=_optional_tuple(doc.seasonal_relevance),
    )
