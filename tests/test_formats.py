import pytest

from op2pass.config import SUPPORTED_TYPES_MSG
from op2pass.formats import detect_delimiter, detect_format


@pytest.mark.parametrize("filename, expected", [
    ("export.txt", "txt"),
    ("EXPORT.TXT", "txt"),
    ("data.1pif", "1pif"),
    ("data.1PIF", "1pif"),
])
def test_detect_format_accepts_known_extensions(filename, expected):
    assert detect_format(filename) == expected


def test_detect_format_rejects_other_extensions():
    with pytest.raises(SystemExit) as exc:
        detect_format("export.csv")
    assert str(exc.value) == SUPPORTED_TYPES_MSG


def test_comma_wins_on_first_line(write_file):
    path = write_file("a.txt", "title,password\tx\nfoo\tbar\n")
    assert detect_delimiter(path) == ","


def test_tab_when_no_comma(write_file):
    path = write_file("a.txt", "title\tpassword\nfoo,1\tbar\n")
    assert detect_delimiter(path) == "\t"


def test_no_delimiter_is_fatal(write_file):
    path = write_file("a.txt", "title password\n")
    with pytest.raises(SystemExit) as exc:
        detect_delimiter(path)
    assert str(exc.value) == SUPPORTED_TYPES_MSG


def test_empty_file_is_fatal(write_file):
    with pytest.raises(SystemExit):
        detect_delimiter(write_file("a.txt", ""))


def test_missing_file_is_fatal(tmp_path):
    path = str(tmp_path / "nope.txt")
    with pytest.raises(SystemExit) as exc:
        detect_delimiter(path)
    assert str(exc.value).startswith(f"Could not read {path}")


def test_non_utf8_first_line_is_fatal(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"Caf\xe9,password\n")
    with pytest.raises(SystemExit) as exc:
        detect_delimiter(str(path))
    assert "not UTF-8 encoded" in str(exc.value)
