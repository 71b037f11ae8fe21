"""
Search functionality for notes: keyword and geographic-area filtering.

All functions work on a snapshot (a plain sequence of notes) and return a
new list, preserving the snapshot's order.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .datamodel import GeoArea, Note


def keyword_matches(note: Note, keyword: str) -> bool:
    """Case-sensitive substring match against title or content."""
    return keyword in note.title or keyword in note.content


def filter_by_keyword(notes: Sequence[Note], keyword: str) -> List[Note]:
    """Notes whose title or content contains ``keyword``."""
    return [note for note in notes if keyword_matches(note, keyword)]


def area_mask(notes: Sequence[Note], area: GeoArea) -> np.ndarray:
    """
    Boolean mask of the notes located inside ``area``.
    Same bounds semantics as ``geo.contains``, evaluated over the whole
    snapshot at once.
    """
    count = len(notes)
    lats = np.fromiter((n.location.lat for n in notes), dtype=np.float64, count=count)
    lons = np.fromiter((n.location.lon for n in notes), dtype=np.float64, count=count)

    top_left, bottom_right = area.top_left, area.bottom_right
    return (
        (lats >= top_left.lat)
        & (lats <= bottom_right.lat)
        & (lons >= top_left.lon)
        & (lons <= bottom_right.lon)
    )


def filter_by_area(notes: Sequence[Note], area: GeoArea) -> List[Note]:
    """Notes located inside ``area``."""
    mask = area_mask(notes, area)
    return [note for note, inside in zip(notes, mask) if inside]


def advanced_search(
    notes: Sequence[Note], area: GeoArea, keyword: str = ""
) -> List[Note]:
    """
    Area filter combined with an optional keyword.
    An empty keyword matches every note inside the area.
    """
    mask = area_mask(notes, area)
    return [
        note
        for note, inside in zip(notes, mask)
        if inside and (not keyword or keyword_matches(note, keyword))
    ]
