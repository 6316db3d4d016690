#!/usr/bin/env python3
"""
Validate the catalog and issue data files and print a summary.

Usage:
  python3 scripts/check_catalog.py [--data-dir PATH]

Exits non-zero when a data file is malformed (schema violation, duplicate id,
unparseable cost range).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from servicehub.application.exceptions import CatalogDataError
from servicehub.infrastructure.knowledge.catalog_loader import load_catalog, load_issue_categories
from servicehub.infrastructure.knowledge.issue_knowledge_base import IssueKnowledgeBase
from servicehub.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate catalog data files")
    parser.add_argument("--data-dir", default=None, help="Override the packaged data directory")
    args = parser.parse_args()

    try:
        catalog = ServiceCatalogStore(load_catalog(args.data_dir))
        kb = IssueKnowledgeBase(load_issue_categories(args.data_dir))
    except CatalogDataError as e:
        print(f"❌ {e}")
        return 1

    metrics = catalog.calculate_metrics()
    print(f"✅ Catalog OK: {metrics.total_services} services")
    for name, count in metrics.services_per_category.items():
        print(f"   {name}: {count}")
    print(f"   average price midpoint: ${metrics.average_price:.2f}")

    issue_count = sum(len(kb.find_issues_by_category(c.id)) for c in kb.list_categories())
    print(f"✅ Issues OK: {issue_count} issues in {len(kb.list_categories())} categories")
    return 0


if __name__ == "__main__":
    sys.exit(main())
