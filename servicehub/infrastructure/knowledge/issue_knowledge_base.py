from __future__ import annotations

import logging

from servicehub.application.exceptions import CatalogDataError
from servicehub.application.ports.knowledge_base import IssueKnowledgeBasePort
from servicehub.application.utils.cost_parser import parse_cost_range
from servicehub.domain.entities.issue import CostEstimate, IssueCategory, MaintenanceIssue, Severity
from servicehub.infrastructure.knowledge.catalog_loader import load_issue_categories


class IssueKnowledgeBase(IssueKnowledgeBasePort):
    """
    Read-only queries over the issue knowledge base.

    Cost strings are parsed once at construction; a malformed one raises
    CatalogDataError here so that queries never fail.
    """

    def __init__(self, categories: list[IssueCategory] | None = None) -> None:
        self._categories = list(categories) if categories is not None else load_issue_categories()
        self._logger = logging.getLogger(__name__)
        self._costs: dict[str, tuple[int, int]] = {}
        for issue in self._iter_issues():
            try:
                cost = parse_cost_range(issue.estimated_cost)
            except ValueError as e:
                raise CatalogDataError(f"issue {issue.id!r}: {e}") from e
            self._costs.setdefault(issue.id, cost)

    def list_categories(self) -> list[IssueCategory]:
        return list(self._categories)

    def get_category(self, category_id: str) -> IssueCategory | None:
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    def find_issues_by_category(self, category_id: str) -> list[MaintenanceIssue]:
        category = self.get_category(category_id)
        if not category:
            return []
        return [issue for sub in category.sub_categories for issue in sub.issues]

    def find_issues_by_severity(self, severity: Severity | str) -> list[MaintenanceIssue]:
        value = severity.value if isinstance(severity, Severity) else severity
        return [issue for issue in self._iter_issues() if issue.severity.value == value]

    def find_seasonal_issues(self, season: str) -> list[MaintenanceIssue]:
        return [
            issue
            for issue in self._iter_issues()
            if issue.seasonal_relevance and any(s.value == season for s in issue.seasonal_relevance)
        ]

    def find_issue_by_id(self, issue_id: str) -> MaintenanceIssue | None:
        for issue in self._iter_issues():
            if issue.id == issue_id:
                return issue
        return None

    def estimate_total_cost(self, issue_ids: list[str]) -> CostEstimate:
        total_min = 0
        total_max = 0
        for issue_id in issue_ids:
            issue = self.find_issue_by_id(issue_id)
            if not issue:
                self._logger.warning("Unknown issue id skipped in cost estimate", extra={"issue_id": issue_id})
                continue
            low, high = self._costs[issue.id]
            total_min += low
            total_max += high
        return CostEstimate(min=total_min, max=total_max)

    def _iter_issues(self):
        for category in self._categories:
            for sub in category.sub_categories:
                yield from sub.issues
