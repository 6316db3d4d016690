from __future__ import annotations

from dataclasses import dataclass, field

from servicehub.domain.entities.lead import FieldError, LeadForm


FIRST_STEP = 1
LAST_STEP = 3


@dataclass(frozen=True)
class WizardState:
    step: int = FIRST_STEP
    form: LeadForm = field(default_factory=LeadForm)
    errors: tuple[FieldError, ...] = ()
    is_submitting: bool = False


@dataclass(frozen=True)
class Notification:
    title: str
    description: str | None = None
    variant: str = "default"  # "default", "destructive"
