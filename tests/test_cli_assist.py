from pathlib import Path
from apps.cli.assist import NO_MATCHES, main, run_session

WORDS = ["racer", "zebra", "cargo", "caper", "unity"]


def _reader(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


def _session(lines, words=WORDS, limit=10):
    out = []
    code = run_session(words, limit=limit, read=_reader(lines), write=out.append)
    return code, "\n".join(out)


def test_session_shows_matches_then_ends_on_eof():
    code, out = _session([
        "carg",                           # too short, re-prompted
        "cargo",
        "y", "g", "y", "x", "b", "b",     # 'x' is re-prompted
        "y",
    ])
    assert code == 0
    assert "Please enter a 5 letter word:" in out
    assert "Please enter [G]reen, [Y]ellow, or [B]lack: " in out
    assert "You entered [C - yellow] [A - green] [R - yellow] [G - black] [O - black]" in out
    # the loop prompts again before the input runs out
    lines = out.splitlines()
    assert lines[-1] == "Please enter the word you guessed:"
    assert lines[-2] == "racer"


def test_session_reenters_colors_after_no():
    code, out = _session([
        "cargo",
        "b", "b", "b", "b", "b",
        "maybe",                          # not y/n
        "n",
        "y", "g", "y", "b", "b",
        "y",
    ])
    assert code == 0
    assert "Please only enter characters 'y' or 'n': " in out
    # the loop prompts again before the input runs out
    lines = out.splitlines()
    assert lines[-1] == "Please enter the word you guessed:"
    assert lines[-2] == "racer"


def test_session_reports_no_matches():
    code, out = _session(["cargo", "y", "g", "y", "b", "b", "y"], words=["zebra"])
    assert code == 1
    assert NO_MATCHES in out


def test_session_solved():
    code, out = _session(["racer", "g", "g", "g", "g", "g", "y"])
    assert code == 0
    assert "Solved in 1: racer" in out


def test_session_stops_after_six_guesses():
    one = ["arose", "b", "b", "b", "b", "b", "y"]
    code, out = _session(one * 7)
    assert code == 1
    assert out.count("\nunity") == 6
    assert "You can't enter more than 6 guesses" in out


def _wordlist(tmp_path: Path) -> str:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return str(p)


def test_main_one_shot(tmp_path, capsys):
    code = main(["--words", _wordlist(tmp_path), "--guess", "cargo:ygybb"])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out.splitlines() == ["racer"]
    assert "1 matching word(s)" in captured.err


def test_main_one_shot_limit(tmp_path, capsys):
    code = main(["--words", _wordlist(tmp_path), "--limit", "2", "--guess", "zzzzz:bbbbb"])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out.splitlines() == ["racer", "cargo"]
    assert "4 matching word(s)" in captured.err


def test_main_one_shot_no_matches(tmp_path, capsys):
    code = main(["--words", _wordlist(tmp_path), "--guess", "arose:bbbbb", "--guess", "unity:bbbbb"])
    assert code == 1
    assert NO_MATCHES in capsys.readouterr().err


def test_main_rejects_bad_guess(tmp_path, capsys):
    code = main(["--words", _wordlist(tmp_path), "--guess", "cargo:ygyxb"])
    assert code == 1
    assert "bad --guess" in capsys.readouterr().err


def test_main_rejects_seventh_guess(tmp_path, capsys):
    code = main(["--words", _wordlist(tmp_path)] + ["--guess", "zzzzz:bbbbb"] * 7)
    assert code == 1
    assert "more than 6" in capsys.readouterr().err


def test_main_missing_wordlist(tmp_path, capsys):
    assert main(["--words", str(tmp_path / "nope.txt"), "--guess", "cargo:ygybb"]) == 2
    assert "not found" in capsys.readouterr().err
