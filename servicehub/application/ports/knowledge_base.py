from __future__ import annotations

from abc import ABC, abstractmethod

from servicehub.domain.entities.issue import CostEstimate, IssueCategory, MaintenanceIssue, Severity


class IssueKnowledgeBasePort(ABC):
    @abstractmethod
    def list_categories(self) -> list[IssueCategory]:
        raise NotImplementedError

    @abstractmethod
    def get_category(self, category_id: str) -> IssueCategory | None:
        raise NotImplementedError

    @abstractmethod
    def find_issues_by_category(self, category_id: str) -> list[MaintenanceIssue]:
        """All issues under every subcategory of the category. [] if unknown."""
        raise NotImplementedError

    @abstractmethod
    def find_issues_by_severity(self, severity: Severity | str) -> list[MaintenanceIssue]:
        """Issues whose severity equals the argument exactly."""
        raise NotImplementedError

    @abstractmethod
    def find_seasonal_issues(self, season: str) -> list[MaintenanceIssue]:
        """Issues whose seasonal relevance contains the season."""
        raise NotImplementedError

    @abstractmethod
    def find_issue_by_id(self, issue_id: str) -> MaintenanceIssue | None:
        raise NotImplementedError

    @abstractmethod
    def estimate_total_cost(self, issue_ids: list[str]) -> CostEstimate:
        """
        Sum the cost ranges of the given issues.
        Unknown ids contribute nothing.
        """
        raise NotImplementedError
