import logging

from snakepilot.score import HighScoreStore


def test_missing_file_reads_zero(tmp_path):
    assert HighScoreStore(tmp_path / "none").get() == 0


def test_set_then_get(tmp_path):
    store = HighScoreStore(tmp_path / "nested" / "highscore")
    store.set(120)
    assert store.get() == 120
    assert (tmp_path / "nested" / "highscore").read_text() == "120"


def test_corrupt_file_reads_zero(tmp_path, caplog):
    path = tmp_path / "highscore"
    path.write_text("not a number")
    with caplog.at_level(logging.WARNING):
        assert HighScoreStore(path).get() == 0
    assert "corrupt" in caplog.text


def test_write_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "file"
    blocker.write_text("")
    store = HighScoreStore(blocker / "highscore")
    with caplog.at_level(logging.WARNING):
        store.set(10)
    assert "Could not save" in caplog.text
