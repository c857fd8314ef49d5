import json
from pathlib import Path
import pytest
from wwwjdic.__main__ import main


def _seed(tmp: Path) -> str:
    path = tmp / "wwwjdic.csv"
    path.write_text(
        "75198\t328521\t総員、脱出せよ！\tAll hands, abandon ship!\t総員~ 脱出 為る(する){せよ}\n"
        "2\t20\t犬\tdog\t犬[x]\n",
        encoding="utf-8",
    )
    return str(path)


@pytest.mark.e2e
def test_cli_json_lookup(tmp_path: Path, capsys):
    rc = main(["--corpus", _seed(tmp_path), "--q", "脱出", "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert data["word"] == "脱出"
    assert data["total"] == 1
    assert data["sentences"][0]["english_text"] == "All hands, abandon ship!"


@pytest.mark.e2e
def test_cli_table_and_error_listing(tmp_path: Path, capsys):
    rc = main(["--corpus", _seed(tmp_path), "--q", "為る", "--q", "猫", "--errors"])
    assert rc == 0
    out, err = capsys.readouterr()
    assert "総員、脱出せよ！" in out
    assert "猫: (no sentences)" in out
    assert "line 2:" in err


@pytest.mark.e2e
def test_cli_strict_failure_exit_code(tmp_path: Path, capsys):
    rc = main(["--corpus", _seed(tmp_path), "--strict", "--q", "総員"])
    assert rc == 1
    assert "line 2" in capsys.readouterr().err


def test_cli_missing_file(tmp_path: Path, capsys):
    rc = main(["--corpus", str(tmp_path / "nope.csv")])
    assert rc == 1
    assert capsys.readouterr().err.startswith("error:")
