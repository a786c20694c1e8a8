import csv
import pytest
from packages.datasets import load_words
from packages.harness import run_case, run_batch, write_csv

WORDS = ["crane", "raise", "stare", "trace", "cared"]


def test_run_case_smoke():
    r = run_case("trace", WORDS)
    assert r["success"] is True
    assert r["guesses"] == 2
    assert r["history"] == [("crane", "YGGBG"), ("trace", "GGGGG")]
    assert r["remaining"] == 1


def test_run_case_with_opener_on_bundled_list():
    words = load_words()
    r = run_case("racer", words, opener="arose")
    assert [g for g, _ in r["history"]] == ["arose", "cared", "racer"]
    assert r["history"][0][1] == "YYBBY"
    assert r["success"] is True and r["opener"] == "arose"


def test_run_case_stuck_on_repeated_letter():
    # 'speed' marks one 'e' black; 'abide' is then filtered out and nothing is left
    r = run_case("abide", ["speed", "abide"])
    assert r["success"] is False
    assert r["guesses"] == 1
    assert r["remaining"] == 0


def test_run_case_rejects_other_turn_budgets():
    with pytest.raises(ValueError):
        run_case("crane", WORDS, max_turns=7)


def test_run_batch_and_csv(tmp_path):
    results = run_batch(WORDS, WORDS, sample=3)
    assert [r["answer"] for r in results] == WORDS[:3]
    assert all(r["success"] for r in results)

    out = write_csv(results, str(tmp_path / "out" / "replay.csv"), max_turns=6)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    assert rows[0]["answer"] == "crane" and rows[0]["guess_1"] == "crane"
    assert rows[0]["patt_1"] == "GGGGG" and rows[0]["guess_2"] == ""
