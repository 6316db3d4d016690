from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from typing import Callable

from servicehub.application.exceptions import LeadStoreError
from servicehub.application.ports.lead_store import LeadStorePort
from servicehub.application.utils.lead_validation import step_errors, validate_form
from servicehub.domain.entities.lead import FieldError, Lead, LeadForm, LeadStatus, Urgency
from servicehub.domain.entities.wizard_state import FIRST_STEP, LAST_STEP, Notification, WizardState


COMMERCIAL_CATEGORY = "commercial"


@dataclass(frozen=True)
class WizardResult:
    state: WizardState
    notification: Notification | None = None
    lead: Lead | None = None


class LeadWizardUseCase:
    """
    Three-step lead intake: (1) category/subcategory, (2) urgency,
    (3) contact details, address and issue description.
    """

    def __init__(
        self,
        store: LeadStorePort,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._store = store
        self._today = today or date.today
        self._logger = logging.getLogger(__name__)

    def validate_step(self, form: LeadForm, step: int) -> list[FieldError]:
        return step_errors(validate_form(form, today=self._today()), step, form)

    def next_step(self, state: WizardState) -> WizardResult:
        all_errors = validate_form(state.form, today=self._today())
        current = step_errors(all_errors, state.step, state.form)
        if current:
            self._logger.info("Wizard step blocked", extra={"step": state.step, "error_count": len(current)})
            return WizardResult(
                state=replace(state, errors=tuple(all_errors)),
                notification=Notification(title="Please fix the errors before continuing", variant="destructive"),
            )
        return WizardResult(state=replace(state, step=min(state.step + 1, LAST_STEP), errors=()))

    def previous_step(self, state: WizardState) -> WizardResult:
        return WizardResult(state=replace(state, step=max(state.step - 1, FIRST_STEP)))

    def submit(self, state: WizardState) -> WizardResult:
        errors = validate_form(state.form, today=self._today())
        if errors:
            return WizardResult(
                state=replace(state, errors=tuple(errors), is_submitting=False),
                notification=Notification(title="Please fix the form errors", variant="destructive"),
            )

        try:
            lead = self._store.create_lead(build_lead(state.form))
        except LeadStoreError as e:
            self._logger.error("Lead submission failed", extra={"error": str(e)})
            return WizardResult(
                state=replace(state, errors=(), is_submitting=False),
                notification=Notification(
                    title="Error submitting request",
                    description="Please try again later.",
                    variant="destructive",
                ),
            )

        self._logger.info("Lead submitted", extra={"lead_id": lead.id, "category_id": lead.category})
        return WizardResult(
            state=WizardState(),
            notification=Notification(
                title="Service request submitted successfully!",
                description="We'll contact you shortly to confirm the details.",
            ),
            lead=lead,
        )


def build_lead(form: LeadForm, lead_id: str | None = None, created_at: datetime | None = None) -> Lead:
    """Turn a validated form into a new lead record."""
    is_commercial = form.category == COMMERCIAL_CATEGORY
    is_scheduled = form.service_type == Urgency.scheduled
    return Lead(
        id=lead_id or str(uuid.uuid4()),
        created_at=created_at or datetime.now(timezone.utc),
        customer_name=form.name.strip(),
        email=form.email.strip(),
        phone=form.phone.strip(),
        service_type=f"{form.category}/{form.subcategory}",
        status=LeadStatus.new,
        notes=form.additional_notes,
        category=form.category,
        subcategory=form.subcategory,
        urgency=form.service_type,
        address=form.address,
        description=form.description.strip(),
        business_name=form.business_name if is_commercial else None,
        business_type=form.business_type if is_commercial else None,
        preferred_date=form.preferred_date if is_scheduled else None,
        preferred_time=form.preferred_time if is_scheduled else None,
    )
