from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from servicehub.api.v1.schemas import CostEstimateRequestSchema, CostEstimateSchema, IssueSchema
from servicehub.application.ports.knowledge_base import IssueKnowledgeBasePort
from servicehub.wiring.dependencies import get_knowledge_base


router = APIRouter()


@router.get("/categories/{category_id}", response_model=list[IssueSchema])
def issues_by_category(category_id: str, kb: IssueKnowledgeBasePort = Depends(get_knowledge_base)):
    return [IssueSchema.from_entity(i) for i in kb.find_issues_by_category(category_id)]


@router.get("/severity/{severity}", response_model=list[IssueSchema])
def issues_by_severity(severity: str, kb: IssueKnowledgeBasePort = Depends(get_knowledge_base)):
    return [IssueSchema.from_entity(i) for i in kb.find_issues_by_severity(severity)]


@router.get("/season/{season}", response_model=list[IssueSchema])
def seasonal_issues(season: str, kb: IssueKnowledgeBasePort = Depends(get_knowledge_base)):
    return [IssueSchema.from_entity(i) for i in kb.find_seasonal_issues(season)]


@router.post("/estimate", response_model=CostEstimateSchema)
def estimate(req: CostEstimateRequestSchema, kb: IssueKnowledgeBasePort = Depends(get_knowledge_base)):
    total = kb.estimate_total_cost(req.issue_ids)
    return CostEstimateSchema(min=total.min, max=total.max)


@router.get("/{issue_id}", response_model=IssueSchema)
def get_issue(issue_id: str, kb: IssueKnowledgeBasePort = Depends(get_knowledge_base)):
    issue = kb.find_issue_by_id(issue_id)
    if not issue:
        raise HTTPException(status_code=404, detail=f"Issue {issue_id!r} not found")
    return IssueSchema.from_entity(issue)
