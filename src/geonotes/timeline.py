"""
In-memory timeline of notes.
Keeps notes keyed by id, in the order they were first added.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from . import search
from .datamodel import GeoArea, Note
from .errors import NoteNotFound
from .exporters import JsonExporter

logger = logging.getLogger(__name__)


class Timeline:
    """Ordered store of notes for the lifetime of the process."""

    def __init__(self):
        self._notes: Dict[int, Note] = {}

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.all_notes())

    def add_note(self, note: Note) -> None:
        """
        Insert a note, or replace the one stored under the same id.
        A replaced note keeps its original position.
        """
        if note.id in self._notes:
            logger.debug("Overwriting note %d", note.id)
        else:
            logger.debug("Adding note %d", note.id)
        self._notes[note.id] = note

    def get_note(self, note_id: int) -> Optional[Note]:
        """Return the note stored under ``note_id``, or None."""
        return self._notes.get(note_id)

    def require_note(self, note_id: int) -> Note:
        note = self._notes.get(note_id)
        if note is None:
            raise NoteNotFound(note_id)
        return note

    def all_notes(self) -> List[Note]:
        """Snapshot of every note in insertion order."""
        return list(self._notes.values())

    def latest(self, n: int) -> List[Note]:
        """The ``n`` most recently created notes, newest first."""
        if n <= 0:
            return []
        notes = sorted(self._notes.values(), key=lambda note: note.created_at, reverse=True)
        return notes[:n]

    def filter_by_keyword(self, keyword: str) -> List[Note]:
        return search.filter_by_keyword(self.all_notes(), keyword)

    def filter_by_area(self, area: GeoArea) -> List[Note]:
        return search.filter_by_area(self.all_notes(), area)

    def search(self, area: GeoArea, keyword: str = "") -> List[Note]:
        """Notes inside ``area`` that also match ``keyword`` when one is given."""
        return search.advanced_search(self.all_notes(), area, keyword)

    def render(self) -> JsonExporter:
        """JSON exporter over the current snapshot."""
        return JsonExporter(self.all_notes())
