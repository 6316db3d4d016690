from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from servicehub.api.v1.schemas import (
    FieldErrorSchema,
    LeadFormSchema,
    LeadSchema,
    LeadStatusUpdateSchema,
    StepValidationSchema,
)
from servicehub.application.exceptions import LeadStoreError
from servicehub.application.use_cases.lead_management import LeadManagementUseCase
from servicehub.application.use_cases.lead_wizard import LeadWizardUseCase
from servicehub.domain.entities.wizard_state import LAST_STEP, WizardState
from servicehub.wiring.dependencies import get_lead_management_use_case, get_lead_wizard_use_case


router = APIRouter()


@router.post("/steps/{step}/validate", response_model=StepValidationSchema)
def validate_step(
    req: LeadFormSchema,
    step: int = Path(..., ge=1, le=LAST_STEP),
    uc: LeadWizardUseCase = Depends(get_lead_wizard_use_case),
):
    errors = uc.validate_step(req.to_entity(), step)
    return StepValidationSchema(
        step=step,
        valid=not errors,
        errors=[FieldErrorSchema.from_entity(e) for e in errors],
    )


@router.post("", response_model=LeadSchema, status_code=201)
def submit_lead(
    req: LeadFormSchema,
    uc: LeadWizardUseCase = Depends(get_lead_wizard_use_case),
):
    result = uc.submit(WizardState(step=LAST_STEP, form=req.to_entity()))
    if result.lead:
        return LeadSchema.from_entity(result.lead)
    if result.state.errors:
        raise HTTPException(
            status_code=422,
            detail=[FieldErrorSchema.from_entity(e).model_dump() for e in result.state.errors],
        )
    title = result.notification.title if result.notification else "Error submitting request"
    raise HTTPException(status_code=502, detail=title)


@router.get("", response_model=list[LeadSchema])
def list_leads(uc: LeadManagementUseCase = Depends(get_lead_management_use_case)):
    notification = uc.fetch_leads()
    if notification:
        raise HTTPException(status_code=502, detail=notification.title)
    return [LeadSchema.from_entity(lead) for lead in uc.leads]


@router.patch("/{lead_id}/status", response_model=LeadSchema)
def update_lead_status(
    lead_id: str,
    req: LeadStatusUpdateSchema,
    uc: LeadManagementUseCase = Depends(get_lead_management_use_case),
):
    try:
        lead = uc.update_lead_status(lead_id, req.status)
    except LeadStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not lead:
        raise HTTPException(status_code=404, detail=f"Lead {lead_id!r} not found")
    return LeadSchema.from_entity(lead)


@router.delete("/{lead_id}", status_code=204)
def delete_lead(lead_id: str, uc: LeadManagementUseCase = Depends(get_lead_management_use_case)) -> Response:
    try:
        deleted = uc.delete_lead(lead_id)
    except LeadStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Lead {lead_id!r} not found")
    return Response(status_code=204)
