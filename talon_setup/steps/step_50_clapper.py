from __future__ import annotations

from ..context import SetupCtx

CLAPPER_APP_ID = "com.github.rafostar.Clapper"


class ClapperStep:
    step_id = "50_clapper"
    title = "Installing Clapper via Flatpak"

    def run(self, ctx: SetupCtx) -> None:
        ctx.install_flatpak_app(CLAPPER_APP_ID)
