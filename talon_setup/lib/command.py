from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


@dataclass(frozen=True)
class Command:
    """Typed descriptor for one external command.

    - argv is executed directly, never through a shell.
    - stdin_from: another command whose stdout is fed to this one (curl ... | sh).
    - only_if: precondition checked by ExecutionPolicy; non-zero exit skips the command.
    - expect_output: when set on a precondition, its stripped stdout must equal it too.
    - user/home: run as a non-privileged user with HOME pointing at its home.
    """

    argv: Tuple[str, ...]
    env: Mapping[str, str] = field(default_factory=dict)
    cwd: Optional[str] = None
    input_text: Optional[str] = None
    stdin_from: Optional["Command"] = None
    only_if: Optional["Command"] = None
    user: Optional[str] = None
    home: Optional[str] = None
    expect_output: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.argv:
            raise ValueError("Command argv must not be empty")
        object.__setattr__(self, "argv", tuple(str(a) for a in self.argv))

    def when(self, precondition: "Command") -> "Command":
        return replace(self, only_if=precondition)

    def as_user(self, user: Optional[str], home: Optional[str] = None) -> "Command":
        return replace(self, user=user, home=home)

    def in_dir(self, cwd: str) -> "Command":
        return replace(self, cwd=cwd)

    def full_argv(self) -> list[str]:
        if not self.user:
            return list(self.argv)
        prefix = ["sudo", "-u", self.user]
        if self.home:
            prefix += ["env", f"HOME={self.home}"]
        return [*prefix, *self.argv]

    def describe(self) -> str:
        text = _fmt_argv(self.full_argv())
        if self.stdin_from is not None:
            text = f"{self.stdin_from.describe()} | {text}"
        if self.only_if is not None:
            text = f"{self.only_if.describe()} && {text}"
        return text

    def __str__(self) -> str:
        return self.describe()


def run_cmd(
    argv: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    input_text: str | None = None,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - Captures stdout/stderr into the debug log.
    - stdin is never the operator terminal; a prompting command reads EOF.
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s", _fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    p = subprocess.run(
        argv_list,
        input=input_text,
        stdin=subprocess.DEVNULL if input_text is None else None,
        text=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        cwd=cwd,
        env=dict(os.environ, **(env or {})),
    )

    if p.stdout:
        logger.debug("STDOUT %s", p.stdout.strip())
    if p.stderr:
        logger.debug("STDERR %s", p.stderr.strip())

    return CmdResult(argv=argv_list, returncode=p.returncode, stdout=p.stdout, stderr=p.stderr)


def run_command(command: Command, *, dry_run: bool = False) -> CmdResult:
    """Execute a Command descriptor, resolving its stdin producer first.

    Never raises on a non-zero exit; a failing producer is returned as the result.
    """

    input_text = command.input_text
    if command.stdin_from is not None:
        produced = run_command(command.stdin_from, dry_run=dry_run)
        if not produced.ok:
            return produced
        input_text = produced.stdout

    return run_cmd(
        command.full_argv(),
        env=command.env,
        cwd=command.cwd,
        input_text=input_text,
        dry_run=dry_run,
    )
