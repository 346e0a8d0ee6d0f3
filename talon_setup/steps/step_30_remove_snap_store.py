from __future__ import annotations

from ..context import SetupCtx
from ..lib.pkg import snap_remove


class RemoveSnapStoreStep:
    step_id = "30_remove_snap_store"
    title = "Removing Snap Store (if present)"

    def run(self, ctx: SetupCtx) -> None:
        ctx.policy.try_or_continue(snap_remove("snap-store"))
