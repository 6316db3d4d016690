from __future__ import annotations

from abc import ABC, abstractmethod

from servicehub.domain.entities.lead import Lead, LeadStatus


class LeadStorePort(ABC):
    @abstractmethod
    def create_lead(self, lead: Lead) -> Lead:
        """Persist a new lead. Returns the stored record."""
        raise NotImplementedError

    @abstractmethod
    def list_leads(self) -> list[Lead]:
        """All leads, newest first."""
        raise NotImplementedError

    @abstractmethod
    def update_lead_status(self, lead_id: str, status: LeadStatus) -> Lead | None:
        """Update lead status. Returns None if the lead does not exist."""
        raise NotImplementedError

    @abstractmethod
    def delete_lead(self, lead_id: str) -> bool:
        """Delete a lead. Returns True if a record was removed."""
        raise NotImplementedError
