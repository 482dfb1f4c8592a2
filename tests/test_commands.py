import io

from tddkata.poker.cli import BAD_PLAYER_INPUT_ERR_MSG, PLAYER_PROMPT
from tddkata.poker.commands import cli_main, webserver_main
from tddkata.poker.file_store import player_store_from_file


def run_cli(monkeypatch, db, text):
    out = io.StringIO()
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    monkeypatch.setattr("sys.stdout", out)
    code = cli_main(["--db", str(db)])
    return code, out.getvalue()


def test_cli_main_records_the_winner(monkeypatch, tmp_path):
    db = tmp_path / "game.db.json"
    code, output = run_cli(monkeypatch, db, "3\nChris wins\n")

    assert code == 0
    assert output.startswith(
        "Let's play poker\nType {Name} wins to record a win\n" + PLAYER_PROMPT
    )
    with player_store_from_file(db) as store:
        assert store.get_player_score("Chris") == 1


def test_cli_main_reports_bad_player_count(monkeypatch, tmp_path):
    db = tmp_path / "game.db.json"
    code, output = run_cli(monkeypatch, db, "pies\n")

    assert code == 0
    assert output.endswith(PLAYER_PROMPT + BAD_PLAYER_INPUT_ERR_MSG)
    with player_store_from_file(db) as store:
        assert list(store.get_league()) == []


def test_cli_main_accumulates_wins_across_runs(monkeypatch, tmp_path):
    db = tmp_path / "game.db.json"
    run_cli(monkeypatch, db, "3\nCleo wins\n")
    run_cli(monkeypatch, db, "4\nCleo wins\n")

    with player_store_from_file(db) as store:
        assert store.get_player_score("Cleo") == 2


def test_cli_main_fails_on_unopenable_database(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    code = cli_main(["--db", str(tmp_path / "missing" / "db.json")])

    assert code == 1
    assert "problem opening" in capsys.readouterr().err


def test_webserver_main_fails_without_template(tmp_path, capsys):
    db = tmp_path / "game.db.json"
    code = webserver_main(["--db", str(db), "--template", str(tmp_path / "none.html")])

    assert code == 1
    assert "problem creating player server" in capsys.readouterr().err


def test_webserver_main_fails_on_bad_database(tmp_path, capsys):
    db = tmp_path / "bad.json"
    db.write_text("{oops")
    code = webserver_main(["--db", str(db)])

    assert code == 1
    assert "problem creating file system player store" in capsys.readouterr().err