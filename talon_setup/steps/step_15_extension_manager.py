from __future__ import annotations

from ..context import SetupCtx
from ..lib.pkg import apt_install


class ExtensionManagerStep:
    step_id = "15_extension_manager"
    title = "Installing GNOME Shell Extension Manager"

    def run(self, ctx: SetupCtx) -> None:
        ctx.policy.try_or_continue(apt_install(["gnome-shell-extension-manager"]))
