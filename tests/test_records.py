from arrowbeat.music import Difficulty
from arrowbeat.records import RECORD_PREFIX, RecordStore, record_filename


def test_record_filename_per_difficulty():
    assert record_filename(Difficulty.EASY) == "arrowbeat_record_easy.txt"
    names = {record_filename(d) for d in Difficulty}
    assert len(names) == len(Difficulty)
    assert all(name.startswith(RECORD_PREFIX) for name in names)


def test_path_is_inside_directory(tmp_path):
    store = RecordStore(tmp_path)
    assert store.path(Difficulty.HARD) == tmp_path / record_filename(Difficulty.HARD)


def test_missing_record_is_zero(tmp_path):
    assert RecordStore(tmp_path / "absent").load(Difficulty.MEDIUM) == 0


def test_round_trip(tmp_path):
    store = RecordStore(tmp_path / "nested")
    store.save(Difficulty.MEDIUM, 17)
    assert store.load(Difficulty.MEDIUM) == 17
    assert store.path(Difficulty.MEDIUM).read_text() == "17"


def test_difficulties_are_independent(tmp_path):
    store = RecordStore(tmp_path)
    store.save(Difficulty.EASY, 4)
    store.save(Difficulty.HARD, 9)
    assert store.load(Difficulty.EASY) == 4
    assert store.load(Difficulty.HARD) == 9
    assert store.load(Difficulty.MEDIUM) == 0


def test_overwrite_replaces_value(tmp_path):
    store = RecordStore(tmp_path)
    store.save(Difficulty.EASY, 123)
    store.save(Difficulty.EASY, 5)
    assert store.load(Difficulty.EASY) == 5


def test_leading_number_is_read(tmp_path):
    store = RecordStore(tmp_path)
    store.path(Difficulty.EASY).write_bytes(b"  42abc")
    assert store.load(Difficulty.EASY) == 42


def test_garbage_reads_as_zero(tmp_path):
    store = RecordStore(tmp_path)
    store.path(Difficulty.EASY).write_bytes(b"junk")
    assert store.load(Difficulty.EASY) == 0


def test_empty_file_reads_as_zero(tmp_path):
    store = RecordStore(tmp_path)
    store.path(Difficulty.HARD).write_bytes(b"")
    assert store.load(Difficulty.HARD) == 0