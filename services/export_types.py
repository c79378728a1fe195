"""
Plain value types shared by the attendance export pipeline
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple

NOT_APPLICABLE = 'N/A'


class AttendanceStatus(Enum):
    """Status of one student on one day; NOT_ENROLLED is never stored"""

    PRESENT = 'present'
    ABSENT = 'absent'
    LATE = 'late'
    NOT_ENROLLED = 'not_enrolled'

    @classmethod
    def recorded_values(cls) -> Tuple[str, ...]:
        return (cls.PRESENT.value, cls.ABSENT.value, cls.LATE.value)

    @property
    def counts_as_attended(self) -> bool:
        return self in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)


@dataclass(frozen=True)
class AttendanceEvent:
    student_id: int
    section_id: int
    class_id: int
    day_number: int
    status: AttendanceStatus
    recorded_at: Optional[datetime] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class AttendedSession:
    section_id: int
    day_number: int
    status: AttendanceStatus


@dataclass
class AttendanceSummary:
    """Sessions a student attended, with present/late counters"""

    student_id: int
    sessions: List[AttendedSession] = field(default_factory=list)
    present_count: int = 0
    late_count: int = 0

    @property
    def total_attended(self) -> int:
        return self.present_count + self.late_count


@dataclass(frozen=True)
class RosterStudent:
    id: int
    student_id: str
    name: str
    email: Optional[str] = None


@dataclass(frozen=True)
class SectionInfo:
    id: int
    section_number: int
    student_ids: FrozenSet[int] = frozenset()


@dataclass
class MatrixRow:
    student_id: str
    name: str
    email: Optional[str]
    section_display: str
    section_numbers: Tuple[int, ...]
    cells: Dict[int, AttendanceStatus]
    total: int
    percentage: float

    @property
    def attendance_fraction(self) -> float:
        """Percentage as a 0..1 fraction, the value written to the sheet"""
        return self.percentage / 100


@dataclass(frozen=True)
class ExportScope:
    class_id: int
    section_id: Optional[int] = None

    @property
    def filename(self) -> str:
        """Download name built from the parsed ids, so classId=007 names class 7"""
        suffix = f'-section-{self.section_id}' if self.section_id is not None else '-allSections'
        return f'attendance-icons-{self.class_id}{suffix}.xlsx'

    def describe(self) -> str:
        return f"classId={self.class_id}, sectionId={self.section_id if self.section_id is not None else 'all'}"
