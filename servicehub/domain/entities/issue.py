from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    emergency = "emergency"


class Season(str, Enum):
    spring = "spring"
    summer = "summer"
    fall = "fall"
    winter = "winter"


@dataclass(frozen=True)
class MaintenanceIssue:
    id: str
    title: str
    description: str
    severity: Severity
    estimated_time: str
    estimated_cost: str  # "$min-$max"
    common_causes: tuple[str, ...]
    preventive_measures: tuple[str, ...]
    professional_required: bool
    required_tools: tuple[str, ...] | None = None
    seasonal_relevance: tuple[Season, ...] | None = None


@dataclass(frozen=True)
class IssueSubCategory:
    id: str
    name: str
    description: str
    issues: tuple[MaintenanceIssue, ...] = ()


@dataclass(frozen=True)
class IssueCategory:
    id: str
    name: str
    description: str
    sub_categories: tuple[IssueSubCategory, ...] = ()


@dataclass(frozen=True)
class CostEstimate:
    min: int = 0
    max: int = 0
