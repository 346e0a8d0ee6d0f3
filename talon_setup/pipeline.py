from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Collection, List, Optional, Protocol, Sequence

from .context import SetupCtx

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single catalog entry."""

    step_id: str
    title: str

    def run(self, ctx: SetupCtx) -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]
    skipped_steps: List[str]
    crashed_steps: List[str]


def run_pipeline(
    *,
    ctx: SetupCtx,
    steps: Sequence[Step],
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    skip: Collection[str] = (),
) -> PipelineResult:
    """Run steps strictly in order; a step that raises never stops the ones after it."""

    ran: List[str] = []
    skipped: List[str] = []
    crashed: List[str] = []

    started = start_at is None

    for step in steps:
        if not started:
            if step.step_id == start_at:
                started = True
            else:
                continue

        if step.step_id in skip:
            logger.info("Skipping step %s (configured)", step.step_id)
            skipped.append(step.step_id)
        else:
            logger.info("=== %s (%s) ===", step.title, step.step_id)
            try:
                step.run(ctx)
                ran.append(step.step_id)
            except Exception:
                logger.exception("Step %s failed, continuing...", step.step_id)
                crashed.append(step.step_id)

        if stop_after is not None and step.step_id == stop_after:
            logger.info("Stopping after %s", stop_after)
            break

    return PipelineResult(ran_steps=ran, skipped_steps=skipped, crashed_steps=crashed)
