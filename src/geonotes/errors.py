"""
Exception types raised by the geonotes core.
"""

from __future__ import annotations


class GeoNotesError(Exception):
    """Base class for all geonotes domain errors."""


class InvalidCoordinate(GeoNotesError):
    """Latitude or longitude outside its valid range."""


class InvalidAttachment(GeoNotesError):
    """An attachment field violates its variant's constraints."""


class InvalidNote(GeoNotesError):
    """A note is missing a required field or has a malformed title."""


class NoteNotFound(GeoNotesError):
    """No note is stored under the requested id."""

    def __init__(self, note_id: int):
        super().__init__(f"Note not found: {note_id}")
        self.note_id = note_id
