from __future__ import annotations

from ..context import SetupCtx
from ..lib.pkg import flatpak_remote_add


class FlathubStep:
    step_id = "18_flathub"
    title = "Setting up Flatpak and Flathub"

    def run(self, ctx: SetupCtx) -> None:
        ctx.policy.try_or_continue(flatpak_remote_add(ctx.cfg.flatpak_remote, ctx.cfg.flatpak_remote_url))
