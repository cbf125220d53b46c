from statusboard.accreditation.dataset import (
    build_element,
    chapter_stats,
    get_chapter,
    get_chapters,
    get_element,
    iter_elements,
    overall_stats,
)

__all__ = [
    "build_element",
    "chapter_stats",
    "get_chapter",
    "get_chapters",
    "get_element",
    "iter_elements",
    "overall_stats",
]
