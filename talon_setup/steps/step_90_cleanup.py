from __future__ import annotations

from ..context import SetupCtx
from ..lib.pkg import apt


class CleanupStep:
    step_id = "90_cleanup"
    title = "Final system cleanup"

    def run(self, ctx: SetupCtx) -> None:
        ctx.policy.try_or_continue(apt("autoremove", "-y"))
        ctx.policy.try_or_continue(apt("clean"))
        ctx.policy.try_or_continue(apt("autoclean", "-y"))
