"""
Tests for the service catalog registry: counting, listing, lookup and search.
"""

from __future__ import annotations

from servicehub.domain.entities.catalog import Category, PriceRange, Service, SubCategory
from servicehub.infrastructure.knowledge.service_catalog_store import (
    ServiceCatalogStore,
    get_compliance_requirements,
    get_required_certifications,
)


def _service(service_id: str, name: str, description: str = "", expertise: tuple[str, ...] = (), **kwargs) -> Service:
    return Service(
        id=service_id,
        name=name,
        description=description,
        estimated_duration="1-2 hours",
        price_range=kwargs.pop("price_range", PriceRange(100, 200)),
        expertise=expertise,
        materials=(),
        frequency=kwargs.pop("frequency", "Annual"),
        **kwargs,
    )


def _small_catalog() -> ServiceCatalogStore:
    return ServiceCatalogStore(
        [
            Category(
                id="home",
                name="Home",
                description="",
                icon="home",
                sub_categories=(
                    SubCategory(
                        id="pipes",
                        name="Pipes",
                        description="",
                        services=(
                            _service("a", "Leak Repair", "fix a leak", ("Plumber",)),
                            _service("b", "Drain Check", "inspect drains for a leak", ("Plumber",)),
                        ),
                    ),
                    SubCategory(
                        id="roof",
                        name="Roof",
                        description="",
                        services=(_service("c", "Roof Leak Patch", "", ("Roofer",), price_range=PriceRange(0, 1000)),),
                    ),
                ),
            ),
            Category(
                id="office",
                name="Office",
                description="",
                icon="building",
                sub_categories=(
                    SubCategory(
                        id="pipes",
                        name="Pipes",
                        description="",
                        services=(_service("d", "Boiler Service", "", ("Leak Detection Specialist",), frequency="Monthly"),),
                    ),
                ),
            ),
        ]
    )


def test_service_count_matches_packaged_catalog():
    """Count equals the sum of every subcategory's services."""
    catalog = ServiceCatalogStore()

    expected = sum(len(sub.services) for c in catalog.list_categories() for sub in c.sub_categories)
    assert catalog.get_service_count() == expected == 26


def test_all_services_follow_registration_order():
    catalog = ServiceCatalogStore()

    entries = catalog.get_all_services()
    category_order = [c.id for c in catalog.list_categories()]
    assert category_order == [
        "residential",
        "commercial",
        "industrial",
        "institutional",
        "transportation",
        "environmental",
        "energy",
    ]
    assert entries[0].category_id == "residential"
    assert entries[0].sub_category_id == "plumbing"
    assert entries[0].service.id == "pipe-repair"
    assert entries[-1].service.id == "energy-audit"
    assert len(entries) == catalog.get_service_count()


def test_services_by_category_returns_only_nested_services():
    catalog = ServiceCatalogStore()

    for category in catalog.list_categories():
        expected = [svc for sub in category.sub_categories for svc in sub.services]
        entries = catalog.get_services_by_category(category.id)
        assert [e.service for e in entries] == expected
        assert all(e.category_id == category.id for e in entries)


def test_unknown_category_returns_empty_list():
    catalog = ServiceCatalogStore()

    assert catalog.get_services_by_category("does-not-exist") == []
    assert catalog.get_category("does-not-exist") is None


def test_search_weights_name_description_expertise():
    catalog = _small_catalog()

    results = catalog.search_services("LEAK")

    assert [(r.service.id, r.relevance) for r in results] == [
        ("a", 5),  # name + description
        ("c", 3),  # name
        ("b", 2),  # description
        ("d", 1),  # expertise
    ]


def test_search_ties_keep_catalog_order():
    catalog = ServiceCatalogStore()

    results = catalog.search_services("electrical")

    assert [(r.category_id, r.service.id, r.relevance) for r in results] == [
        ("residential", "electrical-inspection", 5),
        ("commercial", "electrical-inspection", 5),
    ]


def test_search_ranks_inspection_services():
    catalog = ServiceCatalogStore()

    results = catalog.search_services("inspection")

    assert [(r.service.id, r.relevance) for r in results] == [
        ("electrical-inspection", 5),
        ("roof-inspection", 5),
        ("electrical-inspection", 5),
        ("water-heater-maintenance", 2),
        ("heating-system-maintenance", 2),
        ("dock-leveler-maintenance", 2),
        ("solar-panel-maintenance", 2),
    ]


def test_search_matches_exactly_the_services_containing_the_query():
    """Every matching service appears once; non-matching services never appear."""
    catalog = ServiceCatalogStore()
    all_entries = catalog.get_all_services()

    for query in ("plumb", "maintenance", "SOLAR", "technician", "zzz-no-match", "a"):
        q = query.lower()
        expected = [
            (e.category_id, e.sub_category_id, e.service.id)
            for e in all_entries
            if q in e.service.name.lower()
            or q in e.service.description.lower()
            or any(q in x.lower() for x in e.service.expertise)
        ]
        results = catalog.search_services(query)
        found = [(r.category_id, r.sub_category_id, r.service.id) for r in results]

        assert sorted(found) == sorted(expected)
        assert len(found) == len(set(found))


def test_search_results_sorted_with_stable_ties():
    catalog = ServiceCatalogStore()
    order = {
        (e.category_id, e.sub_category_id, e.service.id): i for i, e in enumerate(catalog.get_all_services())
    }

    for query in ("maintenance", "system", "e"):
        results = catalog.search_services(query)
        for prev, cur in zip(results, results[1:]):
            assert prev.relevance >= cur.relevance
            if prev.relevance == cur.relevance:
                prev_key = (prev.category_id, prev.sub_category_id, prev.service.id)
                cur_key = (cur.category_id, cur.sub_category_id, cur.service.id)
                assert order[prev_key] < order[cur_key]


def test_find_service_and_sub_category_by_id():
    catalog = ServiceCatalogStore()

    service = catalog.find_service_by_id("generator-maintenance")
    assert service is not None
    assert service.price_range == PriceRange(250, 800)

    # first match wins for ids shared across categories
    assert catalog.find_service_by_id("electrical-inspection").price_range == PriceRange(150, 400)
    assert catalog.find_sub_category_by_id("electrical").name == "Electrical Services"

    assert catalog.find_service_by_id("nope") is None
    assert catalog.find_sub_category_by_id("nope") is None


def test_filter_by_expertise_and_frequency():
    catalog = ServiceCatalogStore()

    plumbers = catalog.filter_services_by_expertise("Plumber")
    assert [e.service.id for e in plumbers] == ["drain-cleaning", "water-heater-maintenance"]

    quarterly = catalog.get_services_by_frequency("Quarterly")
    assert [e.service.id for e in quarterly] == [
        "equipment-calibration",
        "medical-gas-systems",
        "fleet-diagnostics",
        "dock-leveler-maintenance",
        "filtration-maintenance",
        "solar-panel-maintenance",
        "generator-maintenance",
    ]


def test_compliance_and_certifications_default_to_empty():
    catalog = ServiceCatalogStore()

    drain = catalog.find_service_by_id("drain-cleaning")
    assert get_compliance_requirements(drain) == ()
    assert get_required_certifications(drain) == ()

    calibration = catalog.find_service_by_id("equipment-calibration")
    assert get_compliance_requirements(calibration) == ("ISO Standards", "Industry Specifications")
    assert get_required_certifications(calibration) == ("Calibration Certification",)


def test_metrics():
    catalog = _small_catalog()

    metrics = catalog.calculate_metrics()

    assert metrics.total_services == 4
    assert metrics.services_per_category == {"Home": 3, "Office": 1}
    assert metrics.average_price == (150 + 150 + 500 + 150) / 4


def test_metrics_on_empty_catalog():
    metrics = ServiceCatalogStore([]).calculate_metrics()

    assert metrics.total_services == 0
    assert metrics.services_per_category == {}
    assert metrics.average_price == 0.0
