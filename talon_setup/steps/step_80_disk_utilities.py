from __future__ import annotations

from ..context import SetupCtx
from ..lib.pkg import apt_install, apt_remove


class DiskUtilitiesStep:
    step_id = "80_disk_utilities"
    title = "Replacing gdisk with gpart"

    def run(self, ctx: SetupCtx) -> None:
        ctx.policy.try_or_continue(apt_remove(["gdisk"]))
        ctx.policy.try_or_continue(apt_install(["gpart"]))
