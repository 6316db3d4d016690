from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum


class Urgency(str, Enum):
    emergency = "emergency"
    scheduled = "scheduled"


class LeadStatus(str, Enum):
    new = "new"
    contacted = "contacted"
    qualified = "qualified"
    converted = "converted"
    lost = "lost"


@dataclass(frozen=True)
class Address:
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""


@dataclass(frozen=True)
class LeadForm:
    category: str = ""
    subcategory: str = ""
    service_type: Urgency | None = None
    name: str = ""
    email: str = ""
    phone: str = ""
    address: Address = field(default_factory=Address)
    business_name: str | None = None
    business_type: str | None = None
    description: str = ""
    preferred_date: date | None = None
    preferred_time: str | None = None
    additional_notes: str | None = None


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class Lead:
    id: str
    created_at: datetime
    customer_name: str
    email: str
    phone: str
    service_type: str  # "<category>/<subcategory>"
    status: LeadStatus = LeadStatus.new
    notes: str | None = None
    category: str = ""
    subcategory: str = ""
    urgency: Urgency | None = None
    address: Address = field(default_factory=Address)
    description: str = ""
    business_name: str | None = None
    business_type: str | None = None
    preferred_date: date | None = None
    preferred_time: str | None = None
