import json
import logging
import os
from functools import lru_cache

from statusboard.accreditation.overrides import ELEMENT_OVERRIDES
from statusboard.accreditation.standards import (
    ACHIEVEMENT,
    CHAPTER_DEFINITIONS,
    COMMITMENT,
    CORE,
    EXCELLENCE,
)
from statusboard.config import settings
from statusboard.models import Chapter, ChapterStats, LearningVideo, ObjectiveElement

logger = logging.getLogger(__name__)

TITLE_MAX_CHARS = 100

# Tracking statuses
COMPLETED = "Completed"
IN_PROGRESS = "In progress"
BLOCKED = "Blocked"
NOT_STARTED = "Not started"

PREV_NC = "Prev NC"


def element_id(code: str) -> str:
    """``"AAC.2.b"`` -> ``"aac-2-b"``."""
    return code.lower().replace(".", "-").replace(" ", "-")


def make_title(description: str) -> str:
    if len(description) > TITLE_MAX_CHARS:
        return description[:TITLE_MAX_CHARS] + "..."
    return description


@lru_cache(maxsize=1)
def load_learning_resources() -> dict[str, dict]:
    """Read the optional learning-resources file.

    Format::

        {"AAC.1.a": {"hindiExplanation": str,
                     "youtubeVideos": [{"title": str, "url": str, "description": str}]}}

    A missing or unset file yields ``{}``.
    """
    path = settings.learning_resources_file
    if not path or not os.path.exists(path):
        return {}
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def build_element(
    code: str,
    description: str = "",
    category: str = COMMITMENT,
    evidences_list: str = "",
    evidence_links: str = "",
    priority: str = "",
    assignee: str = "",
    status: str = "",
    overrides: dict[str, tuple[str, str, str]] | None = None,
    resources: dict[str, dict] | None = None,
) -> ObjectiveElement:
    """Build one objective element.

    Core elements default to the ``CORE`` priority. A non-empty value in the
    override table wins over both the category default and the arguments.
    """
    overrides = ELEMENT_OVERRIDES if overrides is None else overrides
    resources = load_learning_resources() if resources is None else resources

    o_priority, o_assignee, o_status = overrides.get(code, ("", "", ""))
    final_priority = o_priority or ("CORE" if category == CORE else priority)

    eid = element_id(code)
    resource = resources.get(code, {})
    videos = tuple(
        LearningVideo(
            id=f"{eid}-video-{i}",
            title=video.get("title", ""),
            url=video.get("url", ""),
            description=video.get("description", ""),
        )
        for i, video in enumerate(resource.get("youtubeVideos", []))
    )

    return ObjectiveElement(
        id=eid,
        code=code,
        title=make_title(description),
        description=description,
        category=category,
        is_core=category == CORE,
        priority=final_priority,
        assignee=o_assignee or assignee,
        status=o_status or status,
        evidences_list=evidences_list,
        evidence_links=evidence_links,
        hindi_explanation=resource.get("hindiExplanation", ""),
        videos=videos,
    )


@lru_cache(maxsize=1)
def get_chapters() -> tuple[Chapter, ...]:
    """Build the full dataset once; the result never changes afterwards."""
    chapters = tuple(
        Chapter(
            id=code.lower(),
            code=code,
            name=code,
            full_name=full_name,
            type=chapter_type,
            objectives=tuple(build_element(*entry) for entry in entries),
        )
        for code, full_name, chapter_type, entries in CHAPTER_DEFINITIONS
    )
    logger.info(
        "Loaded %d chapters, %d objective elements",
        len(chapters),
        sum(len(c.objectives) for c in chapters),
    )
    return chapters


def get_chapter(code: str) -> Chapter | None:
    code = code.upper()
    for chapter in get_chapters():
        if chapter.code == code:
            return chapter
    return None


def get_element(code: str) -> ObjectiveElement | None:
    chapter = get_chapter(code.split(".", 1)[0])
    if chapter is None:
        return None
    for element in chapter.objectives:
        if element.code.lower() == code.lower():
            return element
    return None


def iter_elements(
    category: str | None = None,
    status: str | None = None,
    priority: str | None = None,
    assignee: str | None = None,
):
    """Yield every element matching all of the given filters (case-insensitive)."""

    def _match(value: str, wanted: str | None) -> bool:
        return wanted is None or value.lower() == wanted.lower()

    for chapter in get_chapters():
        for element in chapter.objectives:
            if (
                _match(element.category, category)
                and _match(element.status, status)
                and _match(element.priority, priority)
                and _match(element.assignee, assignee)
            ):
                yield element


# ------------------------------------------------------------------
# Aggregates
# ------------------------------------------------------------------


def chapter_stats(chapter: Chapter) -> ChapterStats:
    objectives = chapter.objectives

    def _count(pred) -> int:
        return sum(1 for o in objectives if pred(o))

    return ChapterStats(
        total=len(objectives),
        completed=_count(lambda o: o.status == COMPLETED),
        in_progress=_count(lambda o: o.status == IN_PROGRESS),
        blocked=_count(lambda o: o.status == BLOCKED),
        not_started=_count(lambda o: o.status == NOT_STARTED),
        core=_count(lambda o: o.is_core),
        prev_nc=_count(lambda o: o.priority == PREV_NC),
        commitment=_count(lambda o: o.category == COMMITMENT),
        achievement=_count(lambda o: o.category == ACHIEVEMENT),
        excellence=_count(lambda o: o.category == EXCELLENCE),
    )


def overall_stats(chapters: tuple[Chapter, ...] | None = None) -> ChapterStats:
    total = ChapterStats()
    for chapter in get_chapters() if chapters is None else chapters:
        total = total + chapter_stats(chapter)
    return total
