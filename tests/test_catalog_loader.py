"""
Tests for load-time validation of the catalog and issue data files.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from servicehub.application.exceptions import CatalogDataError
from servicehub.domain.entities.issue import Season, Severity
from servicehub.infrastructure.knowledge.catalog_loader import load_catalog, load_issue_categories


def _service(service_id: str = "svc", **overrides) -> dict:
    data = {
        "id": service_id,
        "name": "Service",
        "description": "A service",
        "estimated_duration": "1-2 hours",
        "price_range": {"min": 100, "max": 200},
        "expertise": ["Technician"],
        "materials": [],
        "frequency": "Annual",
    }
    data.update(overrides)
    return data


def _category(category_id: str = "home", services: list[dict] | None = None, sub_ids=("sub",)) -> dict:
    return {
        "id": category_id,
        "name": category_id.title(),
        "description": "",
        "icon": "home",
        "sub_categories": [
            {"id": sub_id, "name": sub_id, "description": "", "services": services or [_service()]}
            for sub_id in sub_ids
        ],
    }


def _write_catalog(root: Path, *categories: dict) -> Path:
    catalog_dir = root / "catalog"
    catalog_dir.mkdir(parents=True)
    names = []
    for i, category in enumerate(categories):
        name = f"{i}_{category['id']}.json"
        (catalog_dir / name).write_text(json.dumps(category), encoding="utf-8")
        names.append(name)
    (catalog_dir / "registry.json").write_text(json.dumps({"categories": names}), encoding="utf-8")
    return root


def _issue(issue_id: str = "issue", **overrides) -> dict:
    data = {
        "id": issue_id,
        "title": "Issue",
        "description": "",
        "severity": "low",
        "estimated_time": "1 hour",
        "estimated_cost": "$10-$20",
        "common_causes": [],
        "preventive_measures": [],
        "professional_required": False,
    }
    data.update(overrides)
    return data


def _write_issues(root: Path, *issues: dict, category_ids=("general",)) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    payload = {
        "categories": [
            {
                "id": category_id,
                "name": category_id,
                "description": "",
                "sub_categories": [{"id": "misc", "name": "Misc", "description": "", "issues": list(issues)}],
            }
            for category_id in category_ids
        ]
    }
    (root / "issues.json").write_text(json.dumps(payload), encoding="utf-8")
    return root


def test_packaged_data_loads():
    categories = load_catalog()
    issue_categories = load_issue_categories()

    assert [c.id for c in categories][:2] == ["residential", "commercial"]
    assert [c.id for c in issue_categories] == ["plumbing", "hvac", "electrical", "structural"]

    pipe_leak = issue_categories[0].sub_categories[0].issues[1]
    assert pipe_leak.severity is Severity.high
    assert pipe_leak.seasonal_relevance == (Season.winter,)
    assert pipe_leak.required_tools is None


def test_loaded_records_are_immutable():
    service = load_catalog()[0].sub_categories[0].services[0]

    assert isinstance(service.expertise, tuple)
    with pytest.raises(AttributeError):
        service.name = "changed"


def test_custom_data_dir(tmp_path):
    _write_catalog(tmp_path, _category("alpha"), _category("beta"))

    categories = load_catalog(tmp_path)

    assert [c.id for c in categories] == ["alpha", "beta"]


def test_duplicate_category_ids_rejected(tmp_path):
    _write_catalog(tmp_path, _category("alpha"), _category("alpha"))

    with pytest.raises(CatalogDataError, match="alpha"):
        load_catalog(tmp_path)


def test_duplicate_sub_category_ids_rejected(tmp_path):
    _write_catalog(tmp_path, _category("alpha", sub_ids=("sub", "sub")))

    with pytest.raises(CatalogDataError, match="subcategory"):
        load_catalog(tmp_path)


def test_duplicate_service_ids_rejected(tmp_path):
    _write_catalog(tmp_path, _category("alpha", services=[_service("x"), _service("x")]))

    with pytest.raises(CatalogDataError, match="service id 'x'"):
        load_catalog(tmp_path)


def test_same_service_id_allowed_in_different_sub_categories(tmp_path):
    _write_catalog(tmp_path, _category("alpha", services=[_service("x")], sub_ids=("one", "two")))

    categories = load_catalog(tmp_path)

    assert [s.services[0].id for s in categories[0].sub_categories] == ["x", "x"]


@pytest.mark.parametrize(
    "price_range",
    [{"min": -1, "max": 10}, {"min": 300, "max": 100}],
)
def test_invalid_price_range_rejected(tmp_path, price_range):
    _write_catalog(tmp_path, _category("alpha", services=[_service(price_range=price_range)]))

    with pytest.raises(CatalogDataError):
        load_catalog(tmp_path)


def test_unknown_fields_rejected(tmp_path):
    _write_catalog(tmp_path, _category("alpha", services=[_service(priceRange={"min": 1, "max": 2})]))

    with pytest.raises(CatalogDataError):
        load_catalog(tmp_path)


def test_missing_registry_fragment_rejected(tmp_path):
    _write_catalog(tmp_path, _category("alpha"))
    registry = tmp_path / "catalog" / "registry.json"
    registry.write_text(json.dumps({"categories": ["missing.json"]}), encoding="utf-8")

    with pytest.raises(CatalogDataError, match="missing.json"):
        load_catalog(tmp_path)


def test_alternate_severity_scale_rejected(tmp_path):
    _write_issues(tmp_path, _issue(severity="severe"))

    with pytest.raises(CatalogDataError):
        load_issue_categories(tmp_path)


def test_unknown_season_rejected(tmp_path):
    _write_issues(tmp_path, _issue(seasonal_relevance=["monsoon"]))

    with pytest.raises(CatalogDataError):
        load_issue_categories(tmp_path)


def test_malformed_cost_rejected(tmp_path):
    _write_issues(tmp_path, _issue(estimated_cost="call for quote"))

    with pytest.raises(CatalogDataError, match="issue"):
        load_issue_categories(tmp_path)


def test_duplicate_issue_ids_across_categories_rejected(tmp_path):
    _write_issues(tmp_path, _issue("leak"), category_ids=("plumbing", "roofing"))

    with pytest.raises(CatalogDataError, match="leak"):
        load_issue_categories(tmp_path)
