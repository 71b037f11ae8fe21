import pytest

from geonotes.datamodel import GeoArea, GeoPoint, Photo
from geonotes.errors import NoteNotFound
from geonotes.exporters import JsonExporter
from geonotes.timeline import Timeline


@pytest.fixture
def timeline(make_note):
    tl = Timeline()
    # Inserted out of chronological order on purpose
    for note_id, minutes in [(1, 30), (2, 10), (3, 50), (4, 20), (5, 40)]:
        tl.add_note(make_note(note_id, minutes=minutes))
    return tl


def test_get_note_round_trip(make_note):
    tl = Timeline()
    note = make_note(
        42, title="Cádiz", content="Playita", attachment=Photo(url="u", width=2000, height=1000)
    )
    tl.add_note(note)
    assert tl.get_note(42) == note
    assert tl.get_note(43) is None


def test_require_note_raises_when_missing():
    tl = Timeline()
    with pytest.raises(NoteNotFound) as exc_info:
        tl.require_note(9)
    assert exc_info.value.note_id == 9


def test_overwrite_keeps_original_position(make_note):
    tl = Timeline()
    tl.add_note(make_note(1, title="First"))
    tl.add_note(make_note(2, title="Second"))
    tl.add_note(make_note(1, title="Replaced", content="new content"))

    notes = tl.all_notes()
    assert [n.id for n in notes] == [1, 2]
    assert notes[0].title == "Replaced"
    assert notes[0].content == "new content"
    assert len(tl) == 2


def test_all_notes_is_a_snapshot(timeline, make_note):
    snapshot = timeline.all_notes()
    timeline.add_note(make_note(6))
    assert len(snapshot) == 5
    assert [n.id for n in timeline] == [1, 2, 3, 4, 5, 6]


def test_latest(timeline):
    assert [n.id for n in timeline.latest(2)] == [3, 5]
    assert timeline.latest(0) == []
    assert timeline.latest(-3) == []
    assert [n.id for n in timeline.latest(100)] == [3, 5, 1, 4, 2]


def test_filter_by_keyword_is_case_sensitive(make_note):
    tl = Timeline()
    tl.add_note(make_note(1, title="Beach day", content="sand"))
    tl.add_note(make_note(2, title="Museum", content="Beach painting"))
    tl.add_note(make_note(3, title="beach lowercase", content="-"))

    assert [n.id for n in tl.filter_by_keyword("Beach")] == [1, 2]
    assert [n.id for n in tl.filter_by_keyword("sand")] == [1]
    assert tl.filter_by_keyword("nothing") == []


def test_filter_by_area(make_note):
    tl = Timeline()
    tl.add_note(make_note(1, lat=15, lon=15))
    tl.add_note(make_note(2, lat=25, lon=25))
    area = GeoArea(top_left=GeoPoint(lat=10, lon=10), bottom_right=GeoPoint(lat=20, lon=20))

    assert [n.id for n in tl.filter_by_area(area)] == [1]


def test_filter_by_area_on_empty_timeline():
    area = GeoArea(top_left=GeoPoint(lat=10, lon=10), bottom_right=GeoPoint(lat=20, lon=20))
    assert Timeline().filter_by_area(area) == []


def test_search_combines_area_and_keyword(make_note):
    tl = Timeline()
    tl.add_note(make_note(1, title="Alcazar", content="gardens", lat=37.38, lon=-5.99))
    tl.add_note(make_note(2, title="Triana", content="bridge", lat=37.38, lon=-6.00))
    tl.add_note(make_note(3, title="Alhambra", content="gardens", lat=37.17, lon=-3.58))
    area = GeoArea(top_left=GeoPoint(lat=37, lon=-7), bottom_right=GeoPoint(lat=38, lon=-5))

    assert [n.id for n in tl.search(area)] == [1, 2]
    assert [n.id for n in tl.search(area, "gardens")] == [1]
    assert tl.search(area, "Alhambra") == []


def test_render_returns_json_exporter(timeline):
    exporter = timeline.render()
    assert isinstance(exporter, JsonExporter)
    assert len(exporter.notes) == 5
