from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .command import CmdResult, Command, run_command

logger = logging.getLogger(__name__)

Runner = Callable[[Command], CmdResult]


@dataclass(frozen=True)
class Failure:
    command: str
    returncode: Optional[int]
    fallback: Optional[str] = None


class ExecutionPolicy:
    """Fire-and-continue supervisor with a single fallback.

    try_or_continue() never raises for a failing command: a failure is logged,
    recorded in self.failures and the caller moves on to its next command.
    """

    def __init__(self, runner: Optional[Runner] = None, *, dry_run: bool = False):
        self._runner: Runner = runner or (lambda c: run_command(c, dry_run=dry_run))
        self._dry_run = dry_run
        self.failures: List[Failure] = []

    def _attempt(self, command: Command) -> Optional[int]:
        """Return None on success, otherwise the exit code (-1 if it never started)."""
        try:
            result = self._runner(command)
        except OSError as e:
            logger.error("Could not start %s: %s", command.argv[0], e)
            return -1
        if result.returncode != 0:
            if result.stderr:
                logger.warning("%s", result.stderr.strip())
            return result.returncode
        return None

    def _precondition_met(self, command: Command) -> bool:
        if command.only_if is None:
            return True
        guard = command.only_if
        try:
            result = self._runner(guard)
        except OSError as e:
            logger.warning("Could not start %s: %s", guard.argv[0], e)
            return False
        if result.returncode != 0:
            return False
        if guard.expect_output is None or self._dry_run:
            return True
        return result.stdout.strip() == guard.expect_output

    def try_or_continue(self, primary: Command, fallback: Optional[Command] = None) -> None:
        logger.info("Running: %s", primary)
        if not self._precondition_met(primary):
            logger.info("Skipping %s (precondition not met)", primary.argv[0])
            return

        code = self._attempt(primary)
        if code is None:
            return

        if fallback is None:
            logger.error("Command failed (%s), continuing...", code)
            self.failures.append(Failure(command=primary.describe(), returncode=code))
            return

        logger.warning("Failed, attempting alternative: %s", fallback)
        if not self._precondition_met(fallback):
            logger.error("Alternative %s not applicable, continuing...", fallback.argv[0])
            self.failures.append(Failure(command=primary.describe(), returncode=code))
            return
        alt_code = self._attempt(fallback)
        if alt_code is None:
            return

        logger.error("Alternative also failed (%s), continuing...", alt_code)
        self.failures.append(
            Failure(command=primary.describe(), returncode=alt_code, fallback=fallback.describe())
        )
