from pixelkit.history import History


def _filled(*entries, capacity=16):
    h = History("/dev/null", capacity)
    for entry in entries:
        h.add(entry)
    return h


def test_history():
    h = _filled("first", "second", "third", "third")

    assert h.prev("") == "third"
    assert h.prev("") == "second"
    assert h.prev("") == "first"
    assert h.prev("") is None
    assert h.next("") == "second"
    assert h.next("") == "third"
    assert h.next("") is None

    assert h.prev("") == "third"
    assert h.next("") is None


def test_history_long():
    h = _filled("first", "second", "third", "fourth", "fifth", "sixth")

    assert h.prev("fifth") is None
    assert h.prev("fift") == "fifth"
    assert h.next("second") is None


def test_history_prefix():
    h = _filled("first", "second", "third", "third")

    assert h.prev("fo") is None
    assert h.prev("se") == "second"
    assert h.prev("") == "first"
    assert h.next("t") == "third"
    assert h.prev("th") is None
    assert h.next("fir") is None


def test_history_empty():
    h = History("/dev/null", 16)

    assert h.prev("") is None
    assert h.next("") is None


def test_history_save_load(tmp_path):
    path = tmp_path / ".history"
    h1 = _filled("first", "second", "third")
    h1.path = path
    h1.save()
    h1.save()

    h2 = History(path, 16)
    h2.load()

    assert h1 == h2


def test_history_capacity():
    h = _filled("first", "second", "third", "fourth", "fifth", capacity=3)

    assert list(h.entries) == ["fifth", "fourth", "third"]


def test_save_creates_parent_and_writes_oldest_first(tmp_path):
    path = tmp_path / "nested" / "dir" / "history"
    h = History(path, 16)
    h.add("first")
    h.add("second")
    h.save()
    assert path.read_text(encoding="utf-8") == "first\nsecond\n"


def test_save_empty_writes_nothing(tmp_path):
    path = tmp_path / "history"
    History(path, 16).save()
    assert not path.exists()


def test_load_missing_file_is_ignored(tmp_path):
    h = History(tmp_path / "missing", 16)
    h.load()
    assert h.is_empty()
    assert len(h) == 0


def test_get_reset_and_clear():
    h = _filled("first", "second")
    assert h.get(0) == "second"
    assert h.get(1) == "first"
    assert h.get(2) is None

    assert h.prev("") == "second"
    h.reset()
    assert h.prev("") == "second"

    h.clear()
    assert h.is_empty()
    assert h.get(0) is None
    assert h.next("") is None