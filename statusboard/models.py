from dataclasses import asdict, dataclass, field, fields


@dataclass
class TranscriptSummary:
    filename: str
    date: str  # ISO-8601, no offset
    duration: str  # "m:ss" or "Unknown"
    word_count: int
    size: str  # "12.3 KB"
    has_json: bool
    has_srt: bool

    def to_dict(self) -> dict:
        return {
            "filename": self.filename,
            "date": self.date,
            "duration": self.duration,
            "wordCount": self.word_count,
            "size": self.size,
            "hasJson": self.has_json,
            "hasSrt": self.has_srt,
        }


@dataclass(frozen=True)
class LearningVideo:
    id: str
    title: str
    url: str
    description: str = ""


@dataclass(frozen=True)
class ObjectiveElement:
    id: str
    code: str
    title: str
    description: str
    category: str  # Core | Commitment | Achievement | Excellence
    is_core: bool
    priority: str  # CORE | P0..P3 | Prev NC | ""
    assignee: str
    status: str  # Completed | In progress | Blocked | Not started | ""
    evidences_list: str = ""
    evidence_links: str = ""
    hindi_explanation: str = ""
    videos: tuple[LearningVideo, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "code": self.code,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "isCore": self.is_core,
            "priority": self.priority,
            "assignee": self.assignee,
            "status": self.status,
            "evidencesList": self.evidences_list,
            "evidenceLinks": self.evidence_links,
            "hindiExplanation": self.hindi_explanation,
            "youtubeVideos": [asdict(v) for v in self.videos],
        }


@dataclass(frozen=True)
class Chapter:
    id: str
    code: str
    name: str
    full_name: str
    type: str  # Patient Centred | Organisation Centred
    objectives: tuple[ObjectiveElement, ...] = field(default=())

    def to_dict(self, include_objectives: bool = True) -> dict:
        data = {
            "id": self.id,
            "code": self.code,
            "name": self.name,
            "fullName": self.full_name,
            "type": self.type,
        }
        if include_objectives:
            data["objectives"] = [o.to_dict() for o in self.objectives]
        return data


@dataclass
class ChapterStats:
    total: int = 0
    completed: int = 0
    in_progress: int = 0
    blocked: int = 0
    not_started: int = 0
    core: int = 0
    prev_nc: int = 0
    commitment: int = 0
    achievement: int = 0
    excellence: int = 0

    def __add__(self, other: "ChapterStats") -> "ChapterStats":
        return ChapterStats(
            **{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)}
        )

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "completed": self.completed,
            "inProgress": self.in_progress,
            "blocked": self.blocked,
            "notStarted": self.not_started,
            "core": self.core,
            "prevNC": self.prev_nc,
            "commitment": self.commitment,
            "achievement": self.achievement,
            "excellence": self.excellence,
        }
