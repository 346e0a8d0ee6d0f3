from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import SetupConfig, load_setup_config
from .context import SetupCtx
from .lib.policy import ExecutionPolicy, Runner
from .lib.preflight import is_privileged, resolve_invoking_user
from .lib.prompt import InputFn, Selector
from .logging_utils import configure_logging
from .pipeline import run_pipeline
from .steps import (
    CleanupStep,
    ClapperStep,
    DeveloperToolsStep,
    DiskUtilitiesStep,
    ExtensionManagerStep,
    FlathubStep,
    FSearchStep,
    OfficeSuiteStep,
    RemoveSnapStoreStep,
    ReplaceBrowserStep,
    SystemUpdateStep,
    TimeshiftStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        SystemUpdateStep(),
        ExtensionManagerStep(),
        FlathubStep(),
        ReplaceBrowserStep(),
        RemoveSnapStoreStep(),
        TimeshiftStep(),
        FSearchStep(),
        ClapperStep(),
        DeveloperToolsStep(),
        OfficeSuiteStep(),
        DiskUtilitiesStep(),
        CleanupStep(),
    ]


def run(
    cfg: SetupConfig,
    *,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    runner: Optional[Runner] = None,
    input_fn: InputFn = input,
) -> int:
    """Run the whole catalog. Returns 1 only when not run as root."""

    actual_log_path = configure_logging(log_path=cfg.log_path)

    if not is_privileged():
        logger.error("This script must be run as root. Try: sudo talon-setup")
        return 1

    ctx = SetupCtx(
        cfg=cfg,
        policy=ExecutionPolicy(runner, dry_run=cfg.dry_run),
        selector=Selector(input_fn, max_attempts=cfg.max_prompt_attempts),
        user=resolve_invoking_user(),
    )
    if cfg.dry_run:
        logger.info("Dry run: commands are logged, not executed")

    result = run_pipeline(
        ctx=ctx,
        steps=build_steps(),
        start_at=start_at,
        stop_after=stop_after,
        skip=cfg.skip_steps,
    )

    failures = ctx.policy.failures
    if failures:
        logger.warning("%d command(s) failed:", len(failures))
        for f in failures:
            logger.warning("  - %s (exit %s)", f.command, f.returncode)
    if result.crashed_steps:
        logger.warning("Steps that raised: %s", ", ".join(result.crashed_steps))

    logger.info("Setup complete! Full log saved in %s", actual_log_path)
    return 0


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return n


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="talon-setup")
    p.add_argument("--config", default=None, help="Optional YAML config file")
    p.add_argument("--log", default=None, help="Path to the setup log (appended to)")
    p.add_argument("--start-at", default=None, help="Start at step_id (e.g. 40_timeshift)")
    p.add_argument("--stop-after", default=None, help="Stop after step_id")
    p.add_argument("--skip", action="append", default=None, metavar="STEP_ID", help="Skip a step (repeatable)")
    p.add_argument("--dry-run", action="store_true", default=None, help="Log commands without running them")
    p.add_argument("--max-attempts", type=_positive_int, default=None, help="Re-prompt limit for numbered choices")

    args = p.parse_args(argv)

    cfg = load_setup_config(args.config).with_overrides(
        log_path=args.log,
        dry_run=args.dry_run,
        max_attempts=args.max_attempts,
        skip=args.skip,
    )
    return run(cfg, start_at=args.start_at, stop_after=args.stop_after)
