import pytest

from scrapkit.optfile import (
    OptionWriter,
    get_all_option_values,
    get_array_option_values,
    get_option_value,
)


def _read(path):
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def _write(path, text):
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def test_writer_single_option_format(tmp_path):
    path = tmp_path / "opts.txt"
    with OptionWriter(path, "header") as writer:
        writer.write_option("url", "https://example.com")
    assert _read(path) == "header\n{url -> https://example.com}\n\n"


def test_writer_array_multi_line_format(tmp_path):
    path = tmp_path / "opts.txt"
    with OptionWriter(path, "start") as writer:
        writer.write_array("exts", [".html", ".htm"])
    assert _read(path) == "start\n{exts -> (\n.html\n.htm\n)}\n\n"


def test_writer_array_single_value_on_one_line(tmp_path):
    path = tmp_path / "opts.txt"
    with OptionWriter(path, "start") as writer:
        writer.write_array("exts", ["html"])
    assert _read(path) == "start\n{exts -> (html)}\n\n"


def test_writer_appends_to_existing_file(tmp_path):
    path = tmp_path / "opts.txt"
    with OptionWriter(path, "one") as writer:
        writer.write_option("a", "1")
    with OptionWriter(path, "two") as writer:
        writer.write_option("a", "2")
    content = _read(path)
    assert content.startswith("one\n")
    assert content.index("one") < content.index("two")
    assert get_all_option_values(path, "a") == ["1", "2"]


def test_close_is_idempotent_and_ends_block(tmp_path):
    path = tmp_path / "opts.txt"
    writer = OptionWriter(path, "h")
    writer.close()
    writer.close()
    assert writer.closed
    assert _read(path) == "h\n\n"


def test_option_value_round_trip(tmp_path):
    path = tmp_path / "opts.txt"
    with OptionWriter(path, "session") as writer:
        writer.write_option("name", "first")
        writer.write_option("depth", "3")
    assert get_option_value(path, "name") == "first"
    assert get_option_value(path, "depth") == "3"


def test_missing_option_gives_none(tmp_path):
    path = tmp_path / "opts.txt"
    _write(path, "{name -> value}\n")
    assert get_option_value(path, "other") is None


def test_name_must_be_delimited(tmp_path):
    path = tmp_path / "opts.txt"
    _write(path, "{xname -> a}\n{name->c}\n{name -> b}\n")
    assert get_option_value(path, "name") == "b"


def test_leading_spaces_of_value_are_skipped(tmp_path):
    path = tmp_path / "opts.txt"
    _write(path, "{name ->    spaced}\n")
    assert get_option_value(path, "name") == "spaced"


def test_all_option_values_in_order(tmp_path):
    path = tmp_path / "opts.txt"
    with OptionWriter(path, "actions") as writer:
        for value in ["alpha", "beta", "gamma"]:
            writer.write_option("action", value)
        writer.write_option("other", "skip")
    assert get_all_option_values(path, "action") == ["alpha", "beta", "gamma"]


def test_all_option_values_empty_when_absent(tmp_path):
    path = tmp_path / "opts.txt"
    _write(path, "{name -> value}\n")
    assert get_all_option_values(path, "missing") == []


@pytest.mark.parametrize(
    "values",
    [["one", "two", "three"], ["single"], ["html", "css", "js", "png"]],
)
def test_array_round_trip(tmp_path, values):
    path = tmp_path / "opts.txt"
    with OptionWriter(path, "types") as writer:
        writer.write_array("types", values)
    assert get_array_option_values(path, "types") == values


def test_array_values_split_on_non_alphanumeric(tmp_path):
    path = tmp_path / "opts.txt"
    _write(path, "{list -> (a-b, c_d\n)}\n")
    assert get_array_option_values(path, "list") == ["a", "b", "c", "d"]


def test_array_missing_option_gives_empty_list(tmp_path):
    path = tmp_path / "opts.txt"
    _write(path, "{list -> (a)}\n")
    assert get_array_option_values(path, "nothing") == []


def test_reading_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_option_value(tmp_path / "absent.txt", "name")
    with pytest.raises(FileNotFoundError):
        get_array_option_values(tmp_path / "absent.txt", "name")