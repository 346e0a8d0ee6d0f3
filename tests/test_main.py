from __future__ import annotations

import pytest

from talon_setup import main as main_mod
from talon_setup.config import SetupConfig
from talon_setup.lib.preflight import InvokingUser

from .conftest import FakeRunner, apt_argv, scripted


@pytest.fixture
def as_root(monkeypatch):
    monkeypatch.setattr(main_mod, "is_privileged", lambda: True)
    monkeypatch.setattr(main_mod, "resolve_invoking_user", lambda: InvokingUser(name="alice", home="/home/alice"))


def _cfg(tmp_path, **raw):
    return SetupConfig(raw={"log_path": str(tmp_path / "setup.log"), **raw})


def test_not_root_exits_1_without_running_anything(monkeypatch, tmp_path):
    monkeypatch.setattr(main_mod, "is_privileged", lambda: False)
    runner = FakeRunner()
    input_fn = scripted(["y", "1"])

    assert main_mod.run(_cfg(tmp_path), runner=runner, input_fn=input_fn) == 1
    assert runner.calls == []
    assert input_fn.prompts == []


def test_every_command_failing_still_exits_0(as_root, tmp_path):
    runner = FakeRunner(default_rc=1)
    answers = ["y", "1", "y", "y", "y", "2"]

    assert main_mod.run(_cfg(tmp_path), runner=runner, input_fn=scripted(answers)) == 0
    # Last catalog entry still ran.
    assert runner.argvs[-1] == apt_argv("autoclean", "-y")


def test_missing_executables_still_exit_0(as_root, tmp_path):
    runner = FakeRunner().raise_when(lambda c: True)
    assert main_mod.run(_cfg(tmp_path), runner=runner, input_fn=scripted([])) == 0
    assert runner.argvs[-1] == apt_argv("autoclean", "-y")


def test_catalog_order(as_root, tmp_path):
    runner = FakeRunner()
    main_mod.run(_cfg(tmp_path), runner=runner, input_fn=scripted(["n", "n", "n", "n", "1"]))

    argvs = runner.argvs
    assert argvs[0] == apt_argv("update")
    assert argvs.index(["add-apt-repository", "-y", "ppa:teejee2008/timeshift"]) < argvs.index(
        ["add-apt-repository", "-y", "ppa:christian-boxdoerfer/fsearch-stable"]
    )
    assert argvs.index(apt_argv("remove", "-y", "gdisk")) < argvs.index(apt_argv("autoremove", "-y"))


def test_main_parses_flags(monkeypatch, tmp_path):
    seen = {}

    def fake_run(cfg, *, start_at=None, stop_after=None, **_):
        seen.update(cfg=cfg, start_at=start_at, stop_after=stop_after)
        return 0

    monkeypatch.setattr(main_mod, "run", fake_run)
    rc = main_mod.main(
        ["--log", str(tmp_path / "x.log"), "--dry-run", "--max-attempts", "3",
         "--skip", "50_clapper", "--start-at", "20_replace_browser"]
    )

    assert rc == 0
    cfg = seen["cfg"]
    assert cfg.dry_run is True
    assert cfg.max_prompt_attempts == 3
    assert cfg.skip_steps == ["50_clapper"]
    assert cfg.log_path == str(tmp_path / "x.log")
    assert seen["start_at"] == "20_replace_browser"


@pytest.mark.parametrize("value", ["0", "-2", "many"])
def test_main_rejects_non_positive_max_attempts(monkeypatch, value, capsys):
    monkeypatch.setattr(main_mod, "run", lambda *a, **k: pytest.fail("run() must not be reached"))
    with pytest.raises(SystemExit) as exc:
        main_mod.main(["--max-attempts", value])
    assert exc.value.code == 2
    assert "--max-attempts" in capsys.readouterr().err
