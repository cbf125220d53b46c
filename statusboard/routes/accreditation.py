from fastapi import APIRouter, HTTPException

from statusboard.accreditation import (
    chapter_stats,
    get_chapter,
    get_chapters,
    get_element,
    iter_elements,
    overall_stats,
)

router = APIRouter(prefix="/api/accreditation", tags=["accreditation"])


@router.get("/chapters")
async def list_chapters() -> list[dict]:
    """Chapter headers with their aggregate counts (no element bodies)."""
    return [
        {**c.to_dict(include_objectives=False), "stats": chapter_stats(c).to_dict()}
        for c in get_chapters()
    ]


@router.get("/chapters/{code}")
async def get_chapter_detail(code: str) -> dict:
    chapter = get_chapter(code)
    if chapter is None:
        raise HTTPException(status_code=404, detail=f"Chapter {code} not found")
    return {**chapter.to_dict(), "stats": chapter_stats(chapter).to_dict()}


@router.get("/elements")
async def list_elements(
    category: str | None = None,
    status: str | None = None,
    priority: str | None = None,
    assignee: str | None = None,
) -> list[dict]:
    return [
        e.to_dict()
        for e in iter_elements(
            category=category, status=status, priority=priority, assignee=assignee
        )
    ]


@router.get("/elements/{code}")
async def get_element_detail(code: str) -> dict:
    element = get_element(code)
    if element is None:
        raise HTTPException(status_code=404, detail=f"Objective element {code} not found")
    return element.to_dict()


@router.get("/stats")
async def get_overall_stats() -> dict:
    return overall_stats().to_dict()
