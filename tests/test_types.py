from pydantic import ValidationError
import pytest

from cnotes.types import Note, Site, to_jsonable


def test_records_are_frozen() -> None:
    site = Site(id=1, name="My Site", site_path="my-site")

    with pytest.raises(ValidationError):
        site.name = "changed"  # type: ignore[misc]


def test_to_jsonable_handles_every_result_shape() -> None:
    note = Note(id=7, title="Hello", body="b", visibility="public")

    assert to_jsonable(note) == {"id": 7, "title": "Hello", "body": "b", "visibility": "public"}
    assert to_jsonable([note]) == [to_jsonable(note)]
    assert to_jsonable(["https://a.example"]) == ["https://a.example"]
    assert to_jsonable("<p>raw</p>") == "<p>raw</p>"
    assert to_jsonable(None) is None
