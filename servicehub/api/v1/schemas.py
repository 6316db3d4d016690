from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from servicehub.domain.entities.catalog import Service, ServiceEntry, ServiceSearchResult
from servicehub.domain.entities.issue import MaintenanceIssue, Season, Severity
from servicehub.domain.entities.lead import Address, FieldError, Lead, LeadForm, LeadStatus, Urgency


class PriceRangeSchema(BaseModel):
    min: int
    max: int


class ServiceSchema(BaseModel):
    id: str
    name: str
    description: str
    estimated_duration: str
    price_range: PriceRangeSchema
    expertise: list[str]
    materials: list[str]
    frequency: str
    compliance: list[str] | None = None
    certifications: list[str] | None = None

    @classmethod
    def from_entity(cls, service: Service) -> "ServiceSchema":
        return cls(
            id=service.id,
            name=service.name,
            description=service.description,
            estimated_duration=service.estimated_duration,
            price_range=PriceRangeSchema(min=service.price_range.min, max=service.price_range.max),
            expertise=list(service.expertise),
            materials=list(service.materials),
            frequency=service.frequency,
            compliance=list(service.compliance) if service.compliance is not None else None,
            certifications=list(service.certifications) if service.certifications is not None else None,
        )


class ServiceEntrySchema(BaseModel):
    category_id: str
    sub_category_id: str
    service: ServiceSchema

    @classmethod
    def from_entity(cls, entry: ServiceEntry) -> "ServiceEntrySchema":
        return cls(
            category_id=entry.category_id,
            sub_category_id=entry.sub_category_id,
            service=ServiceSchema.from_entity(entry.service),
        )


class ServiceSearchResultSchema(ServiceEntrySchema):
    relevance: int

    @classmethod
    def from_entity(cls, result: ServiceSearchResult) -> "ServiceSearchResultSchema":
        return cls(
            category_id=result.category_id,
            sub_category_id=result.sub_category_id,
            service=ServiceSchema.from_entity(result.service),
            relevance=result.relevance,
        )


class SubCategorySummarySchema(BaseModel):
    id: str
    name: str
    description: str
    service_count: int


class CategorySummarySchema(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    sub_categories: list[SubCategorySummarySchema] = Field(default_factory=list)


class ServiceCountSchema(BaseModel):
    count: int


class CatalogMetricsSchema(BaseModel):
    total_services: int
    services_per_category: dict[str, int]
    average_price: float


class IssueSchema(BaseModel):
    id: str
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

    @classmethod
    def from_entity(cls, issue: MaintenanceIssue) -> "IssueSchema":
        return cls(
            id=issue.id,
            title=issue.title,
            description=issue.description,
            severity=issue.severity,
            estimated_time=issue.estimated_time,
            estimated_cost=issue.estimated_cost,
            common_causes=list(issue.common_causes),
            preventive_measures=list(issue.preventive_measures),
            required_tools=list(issue.required_tools) if issue.required_tools is not None else None,
            professional_required=issue.professional_required,
            seasonal_relevance=list(issue.seasonal_relevance) if issue.seasonal_relevance is not None else None,
        )


class CostEstimateRequestSchema(BaseModel):
    issue_ids: list[str] = Field(default_factory=list)


class CostEstimateSchema(BaseModel):
    min: int
    max: int


class AddressSchema(BaseModel):
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""


class LeadFormSchema(BaseModel):
    category: str = ""
    subcategory: str = ""
    service_type: Urgency | None = None
    name: str = ""
    email: str = ""
    phone: str = ""
    address: AddressSchema = Field(default_factory=AddressSchema)
    business_name: str | None = None
    business_type: str | None = None
    description: str = ""
    preferred_date: date | None = None
    preferred_time: str | None = None
    additional_notes: str | None = None

    def to_entity(self) -> LeadForm:
        return LeadForm(
            category=self.category,
            subcategory=self.subcategory,
            service_type=self.service_type,
            name=self.name,
            email=self.email,
            phone=self.phone,
            address=Address(**self.address.model_dump()),
            business_name=self.business_name,
            business_type=self.business_type,
            description=self.description,
            preferred_date=self.preferred_date,
            preferred_time=self.preferred_time,
            additional_notes=self.additional_notes,
        )


class FieldErrorSchema(BaseModel):
    field: str
    message: str

    @classmethod
    def from_entity(cls, error: FieldError) -> "FieldErrorSchema":
        return cls(field=error.field, message=error.message)


class StepValidationSchema(BaseModel):
    step: int
    valid: bool
    errors: list[FieldErrorSchema] = Field(default_factory=list)


class LeadSchema(BaseModel):
    id: str
    created_at: datetime
    customer_name: str
    email: str
    phone: str
    service_type: str
    status: LeadStatus
    notes: str | None = None
    category: str = ""
    subcategory: str = ""
    urgency: Urgency | None = None
    address: AddressSchema = Field(default_factory=AddressSchema)
    description: str = ""
    business_name: str | None = None
    business_type: str | None = None
    preferred_date: date | None = None
    preferred_time: str | None = None

    @classmethod
    def from_entity(cls, lead: Lead) -> "LeadSchema":
        return cls(
            id=lead.id,
            created_at=lead.created_at,
            customer_name=lead.customer_name,
            email=lead.email,
            phone=lead.phone,
            service_type=lead.service_type,
            status=lead.status,
            notes=lead.notes,
            category=lead.category,
            subcategory=lead.subcategory,
            urgency=lead.urgency,
            address=AddressSchema(
                address=lead.address.address,
                city=lead.address.city,
                state=lead.address.state,
                zip_code=lead.address.zip_code,
            ),
            description=lead.description,
            business_name=lead.business_name,
            business_type=lead.business_type,
            preferred_date=lead.preferred_date,
            preferred_time=lead.preferred_time,
        )


class LeadStatusUpdateSchema(BaseModel):
    status: LeadStatus
