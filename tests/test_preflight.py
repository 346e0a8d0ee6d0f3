from __future__ import annotations

import pwd
from types import SimpleNamespace

from talon_setup.lib import preflight
from talon_setup.lib.preflight import InvokingUser, resolve_invoking_user


def test_resolves_sudo_user_home(monkeypatch):
    monkeypatch.setattr(pwd, "getpwnam", lambda name: SimpleNamespace(pw_dir=f"/srv/home/{name}"))
    assert resolve_invoking_user({"SUDO_USER": "alice"}) == InvokingUser(name="alice", home="/srv/home/alice")


def test_unknown_user_falls_back_to_tilde_expansion(monkeypatch):
    def _missing(name):
        raise KeyError(name)

    monkeypatch.setattr(pwd, "getpwnam", _missing)
    user = resolve_invoking_user({"SUDO_USER": "ghost"})
    assert user.name == "ghost"


def test_plain_root_has_no_invoking_user(monkeypatch):
    monkeypatch.setattr(pwd, "getpwuid", lambda uid: SimpleNamespace(pw_dir="/root"))
    assert resolve_invoking_user({}) == InvokingUser(name=None, home="/root")
    assert resolve_invoking_user({"SUDO_USER": "root"}).name is None


def test_is_privileged_checks_effective_uid(monkeypatch):
    monkeypatch.setattr(preflight.os, "geteuid", lambda: 0)
    assert preflight.is_privileged() is True
    monkeypatch.setattr(preflight.os, "geteuid", lambda: 1000)
    assert preflight.is_privileged() is False
