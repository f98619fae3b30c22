# src/e2e/test_cli_tasks.py

import json
from pathlib import Path

import pytest

from wordgraph.__main__ import main


def _seed(tmp: Path) -> str:
    book = tmp / "book.txt"
    book.write_text("paul went to arrakis\npaul went home\nthe desert power\n", encoding="utf-8")
    return str(book)


@pytest.mark.e2e
def test_graph_task_prints_path_and_hops(tmp_path: Path, capsys):
    rc = main(["-i", _seed(tmp_path), "-o", str(tmp_path / "out"), "--task", "graph",
               "--start", "Paul", "--target", "arrakis", "--hops", "2"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Shortest Path between 'paul' and 'arrakis' has total cost 250.000000, with 3 hops." in out
    assert "Path: [paul, went, to, arrakis]" in out
    assert "Total number of nodes with 2 hop(s) from 'paul': 2" in out
    assert "Words: [home, to]" in out


@pytest.mark.e2e
def test_all_tasks_write_reports_and_check(tmp_path: Path, capsys):
    out_dir = tmp_path / "out"
    rc = main(["-i", _seed(tmp_path), "-o", str(out_dir), "--start", "paul",
               "--target", "arrakis", "--len", "3", "--check"])
    assert rc == 0
    text = capsys.readouterr().out
    assert "Bigram Rank 3: 0 pair(s) with 0 occurrence(s)." in text
    assert "Word Rank 1: 2 word(s) with 2 occurrence(s)." in text
    assert "Words include: [paul, went]" in text
    assert "Complete sentence with 3 words is: [paul, went, home]" in text
    assert "Self-check OK" in text
    for name in ("word_frequency.csv", "sorted_words.csv", "bigram_frequency.csv"):
        assert (out_dir / name).exists()


@pytest.mark.e2e
def test_json_output(tmp_path: Path, capsys):
    rc = main(["-i", _seed(tmp_path), "-o", str(tmp_path / "out"), "--task", "gen",
               "--start", "the", "--len", "5", "--json"])
    assert rc == 0
    line = [ln for ln in capsys.readouterr().out.splitlines() if ln.startswith("{")][0]
    assert json.loads(line) == {"complete": False, "words": ["the", "desert", "power"]}


def test_missing_input_is_fatal(tmp_path: Path):
    assert main(["-i", str(tmp_path / "missing.txt"), "--task", "wf"]) == 2


def test_negative_hops_rejected_by_parser(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(["-i", _seed(tmp_path), "--hops", "-1"])
