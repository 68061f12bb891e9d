import pytest

from highscore import load_high_score, save_high_score


def test_missing_file(tmp_path):
    assert load_high_score(str(tmp_path / "nope.txt")) == 0


@pytest.mark.parametrize("content, expected", [
    ("120\n", 120), ("", 0), ("abc", 0), ("-5", 0),
])
def test_load(tmp_path, content, expected):
    path = tmp_path / "best.txt"
    path.write_text(content, encoding="utf-8")
    assert load_high_score(str(path)) == expected


def test_save_overwrites(tmp_path):
    path = tmp_path / "best.txt"
    save_high_score(40, str(path))
    save_high_score(90, str(path))
    assert path.read_text(encoding="utf-8") == "90"
    assert load_high_score(str(path)) == 90


def test_save_failure_raises(tmp_path):
    with pytest.raises(OSError):
        save_high_score(10, str(tmp_path))  # a directory
