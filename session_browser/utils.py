"""Pure helpers: session card formatting and list summary."""

from typing import Optional

from .models import SessionCard, SessionRecord

COMPLETED_LABEL = "✓ Completed"
INCOMPLETE_LABEL = "Mark Complete"


def tags_label(tags) -> str:
    return ", ".join(tags) if tags else "-"


def to_session_card(record: SessionRecord, position: Optional[int] = None) -> SessionCard:
    """Convert a SessionRecord to the card shown in the list."""
    return SessionCard(
        id=record.id,
        title=record.title,
        tags=list(record.tags),
        mins=record.mins,
        difficulty=record.difficulty,
        popularity=record.popularity,
        completed=record.completed,
        tags_label=tags_label(record.tags),
        duration_label=f"{record.mins} mins",
        completion_label=COMPLETED_LABEL if record.completed else INCOMPLETE_LABEL,
        position=position,
    )


def build_summary(filtered_count: int, total_count: int) -> str:
    return f"Showing {filtered_count} of {total_count} sessions"
