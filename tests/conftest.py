"""Shared fixtures: a recording fake runner and scripted operator input."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

import pytest

from talon_setup.config import SetupConfig
from talon_setup.context import SetupCtx
from talon_setup.lib.command import CmdResult, Command
from talon_setup.lib.pkg import APT_DPKG_OPTIONS
from talon_setup.lib.policy import ExecutionPolicy
from talon_setup.lib.preflight import InvokingUser
from talon_setup.lib.prompt import Selector


class FakeRunner:
    """Records every Command it is asked to run.

    fail_when(predicate) makes matching commands exit 1; raise_when makes them
    raise FileNotFoundError as if the executable were missing; stdout_when sets
    the captured stdout of matching commands.
    """

    def __init__(self, default_rc: int = 0):
        self.default_rc = default_rc
        self.calls: List[Command] = []
        self._rules: List[tuple] = []
        self._outputs: List[tuple] = []

    def fail_when(self, predicate: Callable[[Command], bool], rc: int = 1) -> "FakeRunner":
        self._rules.append((predicate, rc))
        return self

    def raise_when(self, predicate: Callable[[Command], bool]) -> "FakeRunner":
        self._rules.append((predicate, None))
        return self

    def stdout_when(self, predicate: Callable[[Command], bool], text: str) -> "FakeRunner":
        self._outputs.append((predicate, text))
        return self

    def __call__(self, command: Command) -> CmdResult:
        self.calls.append(command)
        rc = self.default_rc
        for predicate, rule_rc in self._rules:
            if predicate(command):
                if rule_rc is None:
                    raise FileNotFoundError(command.argv[0])
                rc = rule_rc
                break
        stdout = next((text for predicate, text in self._outputs if predicate(command)), "")
        return CmdResult(argv=list(command.argv), returncode=rc, stdout=stdout, stderr="")

    @property
    def argvs(self) -> List[List[str]]:
        return [list(c.argv) for c in self.calls]

    def index_of(self, *argv: str) -> int:
        return self.argvs.index(list(argv))


def apt_argv(*args: str) -> List[str]:
    return ["apt-get", *APT_DPKG_OPTIONS, *args]


def scripted(answers: Iterable[str]):
    """input() replacement returning answers in order, then EOF."""
    it = iter(answers)
    prompts: List[str] = []

    def _input(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    _input.prompts = prompts  # type: ignore[attr-defined]
    return _input


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def make_ctx(runner):
    def _make(
        answers: Iterable[str] = (),
        *,
        user: Optional[InvokingUser] = None,
        raw: Optional[Dict] = None,
        max_attempts: Optional[int] = None,
    ) -> SetupCtx:
        return SetupCtx(
            cfg=SetupConfig(raw=raw or {}),
            policy=ExecutionPolicy(runner),
            selector=Selector(scripted(answers), max_attempts=max_attempts),
            user=user or InvokingUser(name="alice", home="/home/alice"),
        )

    return _make
