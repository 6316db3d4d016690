from functools import lru_cache
import logging

from servicehub.core.config import settings
from servicehub.application.ports.knowledge_base import IssueKnowledgeBasePort
from servicehub.application.ports.lead_store import LeadStorePort
from servicehub.application.ports.service_catalog import ServiceCatalogPort
from servicehub.application.use_cases.lead_management import LeadManagementUseCase
from servicehub.application.use_cases.lead_wizard import LeadWizardUseCase
from servicehub.infrastructure.knowledge.catalog_loader import load_catalog, load_issue_categories
from servicehub.infrastructure.knowledge.issue_knowledge_base import IssueKnowledgeBase
from servicehub.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore
from servicehub.infrastructure.store.memory_lead_store import MemoryLeadStore
from servicehub.infrastructure.store.supabase_lead_store import SupabaseLeadStore


_lead_store: LeadStorePort | None = None


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore(load_catalog(settings.CATALOG_DATA_DIR))


@lru_cache
def get_knowledge_base() -> IssueKnowledgeBasePort:
    return IssueKnowledgeBase(load_issue_categories(settings.CATALOG_DATA_DIR))


def get_lead_store() -> LeadStorePort:
    global _lead_store
    if _lead_store is None:
        logger = logging.getLogger(__name__)
        if not settings.SUPABASE_URL or settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MemoryLeadStore (ENV=%s, SUPABASE_URL set=%s)", settings.ENV, bool(settings.SUPABASE_URL))
            _lead_store = MemoryLeadStore()
        else:
            logger.info("Using SupabaseLeadStore")
            _lead_store = SupabaseLeadStore(
                base_url=settings.SUPABASE_URL,
                api_key=settings.SUPABASE_SERVICE_KEY or "",
                table=settings.LEADS_TABLE,
                timeout=settings.LEAD_STORE_TIMEOUT_SECONDS,
            )
    return _lead_store


def get_lead_wizard_use_case() -> LeadWizardUseCase:
    return LeadWizardUseCase(store=get_lead_store())


def get_lead_management_use_case() -> LeadManagementUseCase:
    return LeadManagementUseCase(store=get_lead_store())
