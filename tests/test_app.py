from pathlib import Path

import pytest

from arrowbeat.app import main, parse_args
from arrowbeat.music import Difficulty
from arrowbeat.records import RecordStore


def test_defaults():
    args = parse_args([])
    assert args.tick == 10
    assert args.bell is False
    assert args.show_records is False
    assert args.records_dir == Path.home() / ".arrowbeat"


def test_options_parsed(tmp_path):
    args = parse_args(["--records-dir", str(tmp_path), "--tick", "25", "--bell"])
    assert args.records_dir == tmp_path
    assert args.tick == 25
    assert args.bell is True


@pytest.mark.parametrize("tick", ["0", "-3", "fast"])
def test_bad_tick_rejected(tick):
    with pytest.raises(SystemExit):
        parse_args(["--tick", tick])


def test_show_records_prints_each_difficulty(tmp_path, capsys):
    RecordStore(tmp_path).save(Difficulty.HARD, 12)
    assert main(["--records-dir", str(tmp_path), "--show-records"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Easy: 0", "Medium: 0", "Hard: 12"]