import logging

from fastapi import FastAPI

from servicehub.api.v1.catalog import router as catalog_router
from servicehub.api.v1.issues import router as issues_router
from servicehub.api.v1.leads import router as leads_router
from servicehub.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in (
            "category_id",
            "category_count",
            "issue_id",
            "lead_id",
            "query",
            "result_count",
            "step",
            "error_count",
            "status",
            "error",
        ):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=settings.APP_NAME, version="1.0.0")

app.include_router(catalog_router, prefix="/api/v1/catalog", tags=["catalog"])
app.include_router(issues_router, prefix="/api/v1/issues", tags=["issues"])
app.include_router(leads_router, prefix="/api/v1/leads", tags=["leads"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
