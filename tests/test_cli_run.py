import json
import pytest
from apps.cli.run import main

WORDS = ["racer", "zebra", "cargo", "caper", "unity"]


def test_run_writes_csv_and_manifest(tmp_path, capsys):
    wl = tmp_path / "words.txt"
    wl.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    code = main(["--words", str(wl), "--outdir", str(outdir), "--opener", "", "--no-progress"])
    assert code == 0

    csvs = list(outdir.glob("replay_*.csv"))
    manifests = list(outdir.glob("replay_*_manifest.json"))
    assert len(csvs) == 1 and len(manifests) == 1

    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["num_cases"] == 5
    assert manifest["wordlist"]["passed"] is True
    assert "Wrote:" in capsys.readouterr().out


def test_run_rejects_bad_opener(tmp_path):
    with pytest.raises(SystemExit):
        main(["--opener", "toolong", "--outdir", str(tmp_path)])
