import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if SRC.exists():
    sys.path.insert(0, str(SRC))

BASE_TIME = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_note():
    """Factory for notes created ``minutes`` after a fixed base time."""
    from geonotes.datamodel import GeoPoint, Note

    def _make(note_id, title="Note title", content="body", lat=0.5, lon=0.5, minutes=0, **kwargs):
        return Note(
            id=note_id,
            title=title,
            content=content,
            location=GeoPoint(lat=lat, lon=lon),
            created_at=BASE_TIME + timedelta(minutes=minutes),
            **kwargs,
        )

    return _make
