from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

import httpx
from pydantic import TypeAdapter

from servicehub.application.exceptions import LeadStoreContractError, LeadStoreUpstreamError
from servicehub.application.ports.lead_store import LeadStorePort
from servicehub.domain.entities.lead import Address, Lead, LeadStatus, Urgency


# PostgREST trims trailing zeros from fractional seconds.
_TIMESTAMP = TypeAdapter(datetime)


class SupabaseLeadStore(LeadStorePort):
    """
    Lead persistence through the Supabase PostgREST API.

    Each call is a single request with the client timeout; there is no retry.
    Raises:
        LeadStoreUpstreamError: transport failures and non-2xx responses
        LeadStoreContractError: rows that do not map onto a Lead
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        table: str = "leads",
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("SUPABASE_URL is required for the Supabase lead store")
        if not api_key:
            raise ValueError("SUPABASE_SERVICE_KEY is required for the Supabase lead store")

        self._url = f"{base_url.rstrip('/')}/rest/v1/{table}"
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }
        self._client = client or httpx.Client(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    def create_lead(self, lead: Lead) -> Lead:
        rows = self._request("POST", json=[serialize_lead(lead)])
        if not rows:
            raise LeadStoreContractError("Lead insert returned no rows")
        created = deserialize_lead(rows[0])
        self._logger.info("Lead created", extra={"lead_id": created.id})
        return created

    def list_leads(self) -> list[Lead]:
        rows = self._request("GET", params={"select": "*", "order": "created_at.desc"})
        return [deserialize_lead(row) for row in rows]

    def update_lead_status(self, lead_id: str, status: LeadStatus) -> Lead | None:
        rows = self._request("PATCH", params={"id": f"eq.{lead_id}"}, json={"status": status.value})
        if not rows:
            return None
        return deserialize_lead(rows[0])

    def delete_lead(self, lead_id: str) -> bool:
        rows = self._request("DELETE", params={"id": f"eq.{lead_id}"})
        return bool(rows)

    def _request(
        self,
        method: str,
        params: dict[str, str] | None = None,
        json: Any = None,
    ) -> list[dict[str, Any]]:
        try:
            response = self._client.request(method, self._url, params=params, json=json, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "Lead store request rejected",
                extra={"error": str(e), "status": e.response.status_code},
            )
            raise LeadStoreUpstreamError(f"Lead store returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            self._logger.error("Lead store request failed", extra={"error": str(e)})
            raise LeadStoreUpstreamError(f"Lead store unavailable: {e}") from e

        if not response.content:
            return []
        try:
            data = response.json()
        except ValueError as e:
            raise LeadStoreContractError("Lead store returned invalid JSON") from e
        if not isinstance(data, list):
            raise LeadStoreContractError(f"Expected a list of rows, got {type(data).__name__}")
        return data


def serialize_lead(lead: Lead) -> dict[str, Any]:
    return {
        "id": lead.id,
        "created_at": lead.created_at.isoformat(),
        "customer_name": lead.customer_name,
        "email": lead.email,
        "phone": lead.phone,
        "service_type": lead.service_type,
        "status": lead.status.value,
        "notes": lead.notes,
        "category": lead.category,
        "subcategory": lead.subcategory,
        "urgency": lead.urgency.value if lead.urgency else None,
        "address": lead.address.address,
        "city": lead.address.city,
        "state": lead.address.state,
        "zip_code": lead.address.zip_code,
        "description": lead.description,
        "business_name": lead.business_name,
        "business_type": lead.business_type,
        "preferred_date": lead.preferred_date.isoformat() if lead.preferred_date else None,
        "preferred_time": lead.preferred_time,
    }


def deserialize_lead(row: dict[str, Any]) -> Lead:
    try:
        return Lead(
            id=str(row["id"]),
            created_at=_TIMESTAMP.validate_python(row["created_at"]),
            customer_name=row["customer_name"],
            email=row["email"],
            phone=row["phone"],
            service_type=row["service_type"],
            status=LeadStatus(row.get("status") or LeadStatus.new.value),
            notes=row.get("notes"),
            category=row.get("category") or "",
            subcategory=row.get("subcategory") or "",
            urgency=Urgency(row["urgency"]) if row.get("urgency") else None,
            address=Address(
                address=row.get("address") or "",
                city=row.get("city") or "",
                state=row.get("state") or "",
                zip_code=row.get("zip_code") or "",
            ),
            description=row.get("description") or "",
            business_name=row.get("business_name"),
            business_type=row.get("business_type"),
            preferred_date=date.fromisoformat(row["preferred_date"]) if row.get("preferred_date") else None,
            preferred_time=row.get("preferred_time"),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise LeadStoreContractError(f"Malformed lead row: {e}") from e
