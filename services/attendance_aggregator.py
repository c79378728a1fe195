"""
Attendance aggregation for the attendance export
Collapses raw attendance events into one summary per student
"""

import logging
from datetime import datetime

from services.export_types import AttendanceStatus, AttendedSession, AttendanceSummary

logger = logging.getLogger(__name__)


class AttendanceAggregator:
    """Builds per-student attendance summaries from attendance events"""

    @staticmethod
    def _event_order(indexed_event):
        """Earliest recorded event first, then lowest id, then input position"""
        position, event = indexed_event
        recorded_at = event.recorded_at or datetime.max
        event_id = event.id if event.id is not None else float('inf')
        return (recorded_at, event_id, position)

    @staticmethod
    def collapse_duplicates(events):
        """
        Reduce attended events to one status per (student, section, day).

        Only present and late events are kept; absence is inferred later from
        a missing entry. When several events share a slot the earliest
        recorded one wins, so the result does not depend on query order.
        """
        slots = {}
        ordered = sorted(enumerate(events), key=AttendanceAggregator._event_order)
        for _, event in ordered:
            if not event.status.counts_as_attended:
                continue
            key = (event.student_id, event.section_id, event.day_number)
            existing = slots.get(key)
            if existing is None:
                slots[key] = event.status
            elif existing != event.status:
                logger.debug(
                    f"Conflicting statuses for student={key[0]}, section={key[1]}, "
                    f"day={key[2]}: keeping {existing.value}, ignoring {event.status.value}"
                )
        return slots

    @staticmethod
    def aggregate(events):
        """Return a dict of student id -> AttendanceSummary"""
        summaries = {}
        for (student_id, section_id, day_number), status in AttendanceAggregator.collapse_duplicates(events).items():
            summary = summaries.get(student_id)
            if summary is None:
                summary = summaries[student_id] = AttendanceSummary(student_id=student_id)
            summary.sessions.append(AttendedSession(section_id=section_id, day_number=day_number, status=status))
            if status is AttendanceStatus.PRESENT:
                summary.present_count += 1
            else:
                summary.late_count += 1
        return summaries
