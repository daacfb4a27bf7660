import json

import pytest

from pool_passport import config
from pool_passport.main import main

POOLS = [
    {"id": "a", "name": "Pool A", "lat": -33.84, "lng": 151.17},
    {"id": "b", "name": "Pool B", "lat": -33.85, "lng": 151.17},
]


@pytest.fixture(autouse=True)
def restore_config(monkeypatch):
    for name in ("catalog_source", "state_path", "page_size", "timezone", "timezone_from_location"):
        monkeypatch.setattr(config, name, getattr(config, name))


@pytest.fixture
def run(tmp_path):
    catalog = tmp_path / "pools.json"
    catalog.write_text(json.dumps(POOLS), encoding="utf-8")
    state = tmp_path / "state.json"

    def _run(*argv):
        return main([str(catalog), "--state", str(state), *argv])

    _run.state = state
    return _run


def test_status_on_fresh_state(run, capsys):
    assert run("status") == 0
    out = capsys.readouterr().out
    assert "Treasure: 0 / 2" in out
    assert "Pool A" in out
    assert "Treasure found at 0 of 2 locations." in out


def test_claim_all_celebrates(run, capsys):
    assert run("claim") == 0
    assert "Treasure Found! Pool A" in capsys.readouterr().out
    assert run("next") == 0
    assert run("claim") == 0
    out = capsys.readouterr().out
    assert "ALL TREASURE FOUND!" in out
    assert "2 / 2" in out

    saved = json.loads(run.state.read_text(encoding="utf-8"))
    assert set(json.loads(saved[config.VISITED_KEY])) == {"a", "b"}


def test_claim_twice_is_reported(run, capsys):
    run("claim", "b")
    capsys.readouterr()
    run("claim", "b")
    assert "already claimed" in capsys.readouterr().out


def test_claim_unknown_id(run, capsys):
    assert run("claim", "zzz") == 1
    assert "No pool with id 'zzz'" in capsys.readouterr().out


def test_stamps_paging(run, capsys):
    run("--page-size", "1", "claim", "a")
    run("--page-size", "1", "claim", "b")
    capsys.readouterr()
    run("--page-size", "1", "page-next")
    assert "Page 2 of 2" in capsys.readouterr().out
    run("--page-size", "1", "page-next")
    assert "Page 2 of 2" in capsys.readouterr().out
    run("--page-size", "1", "page-prev")
    assert "Page 1 of 2" in capsys.readouterr().out


def test_reset_requires_confirmation(run, capsys, monkeypatch):
    run("claim", "a")
    monkeypatch.setattr("builtins.input", lambda prompt: "n")
    run("reset")
    assert "Reset cancelled." in capsys.readouterr().out
    run("reset", "--yes")
    assert "All treasure reset. 0 / 2" in capsys.readouterr().out


def test_open_maps(run, capsys):
    run("open-maps", "--ios")
    assert capsys.readouterr().out.strip().endswith("https://maps.apple.com/?q=-33.84,151.17")


def test_bad_page_size_exits(run):
    with pytest.raises(SystemExit):
        run("--page-size", "0", "status")


def test_unknown_timezone_exits(run):
    with pytest.raises(SystemExit):
        run("--timezone", "Mars/Olympus", "status")
