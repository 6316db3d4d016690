from __future__ import annotations

import re
from datetime import date

from servicehub.domain.entities.lead import FieldError, LeadForm, Urgency


EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_RE = re.compile(r"\(?([0-9]{3})\)?[-. ]?([0-9]{3})[-. ]?([0-9]{4})")
ZIP_RE = re.compile(r"\d{5}")

STEP_FIELDS: dict[int, tuple[str, ...]] = {
    1: ("category", "subcategory"),
    2: ("serviceType",),
    3: ("name", "email", "phone", "address", "city", "state", "zipCode", "description"),
}
SCHEDULE_FIELDS = ("preferredDate", "preferredTime")


def validate_form(form: LeadForm, today: date | None = None) -> list[FieldError]:
    """Validate the whole lead form. Returns every error, in field order."""
    errors: list[FieldError] = []
    today = today or date.today()

    if not form.category:
        errors.append(FieldError("category", "Category is required"))
    if not form.subcategory:
        errors.append(FieldError("subcategory", "Subcategory is required"))
    if not form.service_type:
        errors.append(FieldError("serviceType", "Service type is required"))
    if not form.name.strip():
        errors.append(FieldError("name", "Name is required"))

    if not form.email.strip() or not validate_email(form.email):
        errors.append(FieldError("email", "Valid email is required"))
    if not form.phone.strip() or not validate_phone(form.phone):
        errors.append(FieldError("phone", "Valid phone number is required"))

    if not form.address.address.strip():
        errors.append(FieldError("address", "Street address is required"))
    if not form.address.city.strip():
        errors.append(FieldError("city", "City is required"))
    if not form.address.state.strip():
        errors.append(FieldError("state", "State is required"))
    if not form.address.zip_code.strip():
        errors.append(FieldError("zipCode", "ZIP code is required"))

    if not form.description.strip():
        errors.append(FieldError("description", "Issue description is required"))

    if form.service_type == Urgency.scheduled:
        if not form.preferred_date:
            errors.append(FieldError("preferredDate", "Preferred date is required for scheduled service"))
        elif form.preferred_date < today:
            errors.append(FieldError("preferredDate", "Preferred date must be in the future"))
        if not form.preferred_time:
            errors.append(FieldError("preferredTime", "Preferred time is required for scheduled service"))

    return errors


def fields_for_step(step: int, form: LeadForm) -> tuple[str, ...]:
    fields = STEP_FIELDS.get(step, ())
    if step == 3 and form.service_type == Urgency.scheduled:
        fields = fields + SCHEDULE_FIELDS
    return fields


def step_errors(errors: list[FieldError], step: int, form: LeadForm) -> list[FieldError]:
    """Keep only the errors for fields shown on the given wizard step."""
    fields = fields_for_step(step, form)
    return [error for error in errors if error.field in fields]


def format_phone_number(phone: str) -> str:
    digits = re.sub(r"\D", "", phone)
    match = re.fullmatch(r"(\d{3})(\d{3})(\d{4})", digits)
    if match:
        return f"({match.group(1)}) {match.group(2)}-{match.group(3)}"
    return phone


def format_zip_code(zip_code: str) -> str:
    return re.sub(r"\D", "", zip_code)[:5]


def validate_zip_code(zip_code: str) -> bool:
    return bool(ZIP_RE.fullmatch(zip_code))


def validate_email(email: str) -> bool:
    return bool(EMAIL_RE.fullmatch(email))


def validate_phone(phone: str) -> bool:
    return bool(PHONE_RE.fullmatch(phone))
