import pytest

from wavecodes.core.loaders import (
    load_from_json_file,
    load_from_text_file,
    parse_track_list,
    write_page,
    write_track_ids,
)
from wavecodes.errors import ErrorKind, ParseError, WaveCodeIOError


def test_text_file_strips_and_drops_blank_lines(tmp_path):
    path = tmp_path / "tracks.txt"
    path.write_text(" abc \n\nxyz ", encoding="utf-8")
    assert load_from_text_file(path) == ["abc", "xyz"]


def test_text_file_does_not_validate_contents(tmp_path):
    path = tmp_path / "tracks.txt"
    path.write_text("not an id\n69Kzq3FMkDwiSFBQzRckFD\n", encoding="utf-8")
    assert load_from_text_file(str(path)) == ["not an id", "69Kzq3FMkDwiSFBQzRckFD"]


def test_missing_text_file_is_io_error(tmp_path):
    with pytest.raises(WaveCodeIOError) as excinfo:
        load_from_text_file(tmp_path / "missing.txt")
    assert excinfo.value.kind is ErrorKind.IO


def test_json_file(tmp_path):
    path = tmp_path / "tracks.json"
    path.write_text('[\n  "69Kzq3FMkDwiSFBQzRckFD",\n  "3wUMcPzXcmaeW8QxTdyXQO"\n]', encoding="utf-8")
    assert load_from_json_file(path) == ["69Kzq3FMkDwiSFBQzRckFD", "3wUMcPzXcmaeW8QxTdyXQO"]


@pytest.mark.parametrize("content", ['["abc",', '{"tracks": []}', "[1, 2]"])
def test_bad_json_is_parse_error(tmp_path, content):
    path = tmp_path / "tracks.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ParseError) as excinfo:
        load_from_json_file(path)
    assert excinfo.value.kind is ErrorKind.PARSE


def test_missing_json_file_is_io_error(tmp_path):
    with pytest.raises(WaveCodeIOError):
        load_from_json_file(tmp_path / "missing.json")


def test_parse_track_list():
    assert parse_track_list(" a, b ,,c ,") == ["a", "b", "c"]
    assert parse_track_list("") == []


def test_write_track_ids_has_no_trailing_newline(tmp_path):
    path = tmp_path / "out.txt"
    write_track_ids(path, ["a", "b"])
    assert path.read_text(encoding="utf-8") == "a\nb"


def test_write_to_missing_directory_is_io_error(tmp_path):
    with pytest.raises(WaveCodeIOError):
        write_page(tmp_path / "nope" / "page.html", "<html></html>")
