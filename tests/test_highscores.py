import struct

from serpentine.highscores import HighScoreManager


def test_empty_when_file_missing(tmp_path):
    manager = HighScoreManager(tmp_path / "scores.dat")
    assert manager.scores == ()
    assert manager.high_score == 0


def test_add_score_sorts_descending(tmp_path):
    manager = HighScoreManager(tmp_path / "scores.dat")
    for score in (30, 10, 50, 20):
        manager.add_score(score)
    assert manager.scores == (50, 30, 20, 10)
    assert manager.high_score == 50


def test_keeps_only_ten(tmp_path):
    manager = HighScoreManager(tmp_path / "scores.dat")
    for score in range(15):
        manager.add_score(score)
    assert len(manager.scores) == 10
    assert manager.scores == tuple(sorted(range(15), reverse=True)[:10])


def test_scores_persist(tmp_path):
    path = tmp_path / "scores.dat"
    first = HighScoreManager(path)
    first.add_score(40)
    first.add_score(70)
    second = HighScoreManager(path)
    assert second.scores == first.scores


def test_file_holds_little_endian_ints(tmp_path):
    path = tmp_path / "scores.dat"
    manager = HighScoreManager(path)
    manager.add_score(1)
    manager.add_score(2)
    assert path.read_bytes() == struct.pack("<2i", 2, 1)


def test_partial_trailing_bytes_ignored(tmp_path):
    path = tmp_path / "scores.dat"
    path.write_bytes(struct.pack("<i", 90) + b"\x01\x02")
    manager = HighScoreManager(path)
    assert manager.scores == (90,)


def test_loaded_order_is_kept_until_add(tmp_path):
    path = tmp_path / "scores.dat"
    path.write_bytes(struct.pack("<2i", 5, 80))
    manager = HighScoreManager(path)
    assert manager.high_score == 5
    manager.add_score(10)
    assert manager.scores == (80, 10, 5)


def test_unwritable_path_is_ignored(tmp_path):
    manager = HighScoreManager(tmp_path / "missing_dir" / "scores.dat")
    manager.add_score(12)
    assert manager.high_score == 12
    assert not (tmp_path / "missing_dir").exists()