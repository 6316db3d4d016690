from __future__ import annotations

import logging
from dataclasses import replace

from servicehub.application.ports.lead_store import LeadStorePort
from servicehub.domain.entities.lead import Lead, LeadStatus


class MemoryLeadStore(LeadStorePort):
    def __init__(self) -> None:
        self._leads: dict[str, Lead] = {}
        self._logger = logging.getLogger(__name__)

    def create_lead(self, lead: Lead) -> Lead:
        self._leads[lead.id] = lead
        self._logger.info("Mock lead stored", extra={"lead_id": lead.id})
        return lead

    def list_leads(self) -> list[Lead]:
        return sorted(self._leads.values(), key=lambda lead: lead.created_at, reverse=True)

    def update_lead_status(self, lead_id: str, status: LeadStatus) -> Lead | None:
        lead = self._leads.get(lead_id)
        if not lead:
            return None
        updated = replace(lead, status=status)
        self._leads[lead_id] = updated
        return updated

    def delete_lead(self, lead_id: str) -> bool:
        return self._leads.pop(lead_id, None) is not None
