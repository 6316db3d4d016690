from __future__ import annotations

import logging

from servicehub.application.exceptions import LeadStoreError
from servicehub.application.ports.lead_store import LeadStorePort
from servicehub.domain.entities.lead import Lead, LeadStatus
from servicehub.domain.entities.wizard_state import Notification


class LeadManagementUseCase:
    """Admin view over stored leads. Keeps the last fetched list and a loading flag."""

    def __init__(self, store: LeadStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)
        self.leads: list[Lead] = []
        self.loading = False
        self.notification: Notification | None = None

    def fetch_leads(self) -> Notification | None:
        """Refresh the lead list. Returns a notification on failure, None on success.

        The result is also kept on `notification`, so a failed refresh after a
        status update or delete stays visible to the caller.
        """
        self.loading = True
        self.notification = None
        try:
            self.leads = self._store.list_leads()
        except LeadStoreError as e:
            self._logger.error("Error fetching leads", extra={"error": str(e)})
            self.notification = Notification(title="Error fetching leads", description=str(e), variant="destructive")
        finally:
            self.loading = False
        return self.notification

    def update_lead_status(self, lead_id: str, status: LeadStatus) -> Lead | None:
        """Returns the updated lead, or None if it does not exist. Store errors propagate."""
        updated = self._store.update_lead_status(lead_id, status)
        if updated:
            self._logger.info("Lead status updated", extra={"lead_id": lead_id, "status": status.value})
            self.fetch_leads()
        return updated

    def delete_lead(self, lead_id: str) -> bool:
        deleted = self._store.delete_lead(lead_id)
        if deleted:
            self._logger.info("Lead deleted", extra={"lead_id": lead_id})
            self.fetch_leads()
        return deleted
