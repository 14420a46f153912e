"""
Lexicon routes: /api/lexicon
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from muajam.core.pipeline import Pipeline
from muajam.core.result import ValidationFailure
from muajam.core.validate import EntryForm
from muajam.server.deps import get_pipeline


router = APIRouter(prefix="/api/lexicon", tags=["lexicon"])


class AddEntryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pos: str | None = None
    word: str | None = None
    past: str | None = None
    pres: str | None = None
    definition: str | None = Field(default=None, alias="def")


class UpdateEntryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    terms0: str = ""
    terms1: str = ""
    definition: str = Field(default="", alias="def")


class DeleteEntryRequest(BaseModel):
    id: str
    terms0: str = ""
    terms1: str = ""


def write_failure(error) -> JSONResponse:
    return JSONResponse(status_code=403, content={"success": False, "error": str(error)})


# === Reads ===

@router.get("/search")
async def search(q: str | None = None, pipeline: Pipeline = Depends(get_pipeline)):
    """Search every dictionary, first dictionary wins on shared ids."""
    results = pipeline.search(q)
    return {"q": q, "results": [r.to_dict() for r in results]}


@router.get("/duplicates")
async def duplicates(pipeline: Pipeline = Depends(get_pipeline)):
    """Duplicate-entry report across dictionaries."""
    return {"results": [r.to_dict() for r in pipeline.duplicates()]}


@router.post("/refresh")
async def refresh(pipeline: Pipeline = Depends(get_pipeline)):
    pipeline.refresh()
    return {"refreshed": True}


# === Writes ===

@router.post("/entries")
async def add_entry(req: AddEntryRequest, pipeline: Pipeline = Depends(get_pipeline)):
    """Validate and add a word, stop word or verb."""
    form = EntryForm(
        part_of_speech=req.pos,
        word=req.word,
        past_tense=req.past,
        present_tense=req.pres,
        definition=req.definition,
    )
    result = pipeline.submit_entry(form)
    if result.ok:
        return {"success": "New word successfully added", "entry": result.value.to_dict()}
    if isinstance(result.error, ValidationFailure):
        return JSONResponse(status_code=400, content={"success": False, "errors": result.error.messages})
    return write_failure(result.error)


@router.post("/update")
async def update_entry(req: UpdateEntryRequest, pipeline: Pipeline = Depends(get_pipeline)):
    result = pipeline.update_entry(req.id, req.terms0, req.terms1, req.definition)
    if not result.ok:
        return write_failure(result.error)
    return {"id": req.id, "updated": True, "entry": result.value.to_dict()}


@router.post("/delete")
async def delete_entry(req: DeleteEntryRequest, pipeline: Pipeline = Depends(get_pipeline)):
    result = pipeline.delete_entry(req.id, req.terms0, req.terms1)
    if not result.ok:
        return write_failure(result.error)
    return {"id": req.id, "deleted": True}
