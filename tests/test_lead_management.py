"""
Tests for admin lead management, including the loading flag lifecycle.
"""

from __future__ import annotations

from datetime import datetime, timezone

from servicehub.application.exceptions import LeadStoreUpstreamError
from servicehub.application.use_cases.lead_management import LeadManagementUseCase
from servicehub.domain.entities.lead import Lead, LeadStatus
from servicehub.infrastructure.store.memory_lead_store import MemoryLeadStore


def _lead(lead_id: str, day: int) -> Lead:
    return Lead(
        id=lead_id,
        created_at=datetime(2026, 10, day, tzinfo=timezone.utc),
        customer_name=f"Customer {lead_id}",
        email=f"{lead_id}@example.com",
        phone="555-123-4567",
        service_type="residential/plumbing",
    )


class RecordingStore(MemoryLeadStore):
    """Captures the loading flag while list_leads runs."""

    def __init__(self, use_case_ref: list, fail: bool = False) -> None:
        super().__init__()
        self._ref = use_case_ref
        self._fail = fail
        self.loading_seen: list[bool] = []

    def list_leads(self):
        self.loading_seen.append(self._ref[0].loading)
        if self._fail:
            raise LeadStoreUpstreamError("timeout")
        return super().list_leads()


def test_fetch_leads_newest_first():
    store = MemoryLeadStore()
    store.create_lead(_lead("old", 1))
    store.create_lead(_lead("new", 5))
    uc = LeadManagementUseCase(store=store)

    assert uc.fetch_leads() is None
    assert [lead.id for lead in uc.leads] == ["new", "old"]


def test_loading_clears_after_success():
    ref: list = []
    store = RecordingStore(ref)
    uc = LeadManagementUseCase(store=store)
    ref.append(uc)

    uc.fetch_leads()

    assert store.loading_seen == [True]
    assert uc.loading is False


def test_loading_clears_after_failure():
    ref: list = []
    store = RecordingStore(ref, fail=True)
    uc = LeadManagementUseCase(store=store)
    uc.leads = [_lead("kept", 1)]
    ref.append(uc)

    notification = uc.fetch_leads()

    assert store.loading_seen == [True]
    assert uc.loading is False
    assert notification.variant == "destructive"
    assert [lead.id for lead in uc.leads] == ["kept"]


def test_update_status_refreshes_list():
    store = MemoryLeadStore()
    store.create_lead(_lead("a", 1))
    uc = LeadManagementUseCase(store=store)

    updated = uc.update_lead_status("a", LeadStatus.contacted)

    assert updated.status == LeadStatus.contacted
    assert uc.leads[0].status == LeadStatus.contacted
    assert uc.update_lead_status("missing", LeadStatus.lost) is None


def test_delete_lead():
    store = MemoryLeadStore()
    store.create_lead(_lead("a", 1))
    uc = LeadManagementUseCase(store=store)

    assert uc.delete_lead("a") is True
    assert uc.leads == []
    assert uc.delete_lead("a") is False


class ListFailsStore(MemoryLeadStore):
    def list_leads(self):
        raise LeadStoreUpstreamError("timeout")


def test_refresh_failure_after_write_is_kept():
    store = ListFailsStore()
    store.create_lead(_lead("a", 1))
    uc = LeadManagementUseCase(store=store)

    updated = uc.update_lead_status("a", LeadStatus.qualified)

    assert updated.status == LeadStatus.qualified
    assert uc.notification.title == "Error fetching leads"
    assert uc.loading is False

    assert uc.delete_lead("a") is True
    assert uc.notification.variant == "destructive"
