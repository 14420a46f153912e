"""
Content routes: /api/content, /api/annotate
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from muajam.core.pipeline import Pipeline
from muajam.server.deps import get_pipeline


router = APIRouter(prefix="/api", tags=["content"])


class CreateContentRequest(BaseModel):
    content: str


class AnnotateRequest(BaseModel):
    text: str


@router.post("/content")
async def create_content(req: CreateContentRequest, pipeline: Pipeline = Depends(get_pipeline)):
    """Store submitted text, returns its id."""
    if not req.content.strip():
        raise HTTPException(status_code=400, detail="Content cannot be blank")
    return {"id": pipeline.store_content(req.content)}


@router.get("/content/{content_id}")
async def get_content(content_id: str, pipeline: Pipeline = Depends(get_pipeline)):
    """Retrieve stored text, annotated against the lexicon."""
    result = pipeline.open_content(content_id)
    if not result.ok:
        raise HTTPException(status_code=404, detail=str(result.error))
    return result.value.to_dict()


@router.post("/annotate")
async def annotate(req: AnnotateRequest, pipeline: Pipeline = Depends(get_pipeline)):
    """Annotate text without storing it."""
    return pipeline.annotate(req.text).to_dict()
