"""
Exporters that render a snapshot of notes as text documents.

Both output shapes are consumed verbatim by other tools, so the layout
below (spacing, number formatting, ordering) must not change.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Sequence

from .datamodel import Note

logger = logging.getLogger(__name__)


_JSON_NOTE_TEMPLATE = """{{
  "id": {id},
  "title": "{title}",
  "content": "{content}",
  "location": {{
    "lat": {lat:f},
    "lon": {lon:f} }},
  "createdAt": "{created_at}"
}}
"""

_JSON_DOCUMENT_TEMPLATE = """{{ "notes": [ {notes} ] }}
"""

_MARKDOWN_LINE_TEMPLATE = '- [ID {id}] "{title}" — ({lat:.6f}, {lon:.6f}) — {date}'


def format_instant(value: datetime) -> str:
    """ISO-8601 UTC timestamp with a ``Z`` suffix."""
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


class Exporter(ABC):
    """Interface for note exporters."""

    def __init__(self, notes: Sequence[Note]):
        self.notes: List[Note] = list(notes)

    @abstractmethod
    def export(self) -> str:
        """Render the notes as a single string."""


class JsonExporter(Exporter):
    """
    JSON-like document with one object per note, highest id first.
    Text fields are interpolated as-is; quotes are not escaped.
    """

    @staticmethod
    def _render_note(note: Note) -> str:
        return _JSON_NOTE_TEMPLATE.format(
            id=note.id,
            title=note.title,
            content=note.content,
            lat=note.location.lat,
            lon=note.location.lon,
            created_at=format_instant(note.created_at),
        )

    def export(self) -> str:
        ordered = sorted(self.notes, key=lambda note: note.id, reverse=True)
        body = ",\n".join(self._render_note(note) for note in ordered)
        logger.debug("Rendered %d notes as JSON", len(ordered))
        return _JSON_DOCUMENT_TEMPLATE.format(notes=body)


class MarkdownExporter(Exporter):
    """Bulleted outline, newest note first."""

    @staticmethod
    def _render_line(note: Note) -> str:
        return _MARKDOWN_LINE_TEMPLATE.format(
            id=note.id,
            title=note.title,
            lat=note.location.lat,
            lon=note.location.lon,
            date=format_instant(note.created_at)[:10],
        )

    def export(self) -> str:
        ordered = sorted(self.notes, key=lambda note: note.created_at, reverse=True)
        logger.debug("Rendered %d notes as Markdown", len(ordered))
        return "\n".join(self._render_line(note) for note in ordered)


EXPORTERS = {
    "json": JsonExporter,
    "markdown": MarkdownExporter,
}


def export_notes(notes: Sequence[Note], fmt: str = "json") -> str:
    """Render ``notes`` with the exporter registered under ``fmt``."""
    try:
        exporter_cls = EXPORTERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown export format: {fmt}") from None
    return exporter_cls(notes).export()
