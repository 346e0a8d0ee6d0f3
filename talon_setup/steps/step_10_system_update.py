from __future__ import annotations

from ..context import SetupCtx
from ..lib.pkg import apt, apt_install, apt_update

BASE_PACKAGES = [
    "curl",
    "jq",
    "flatpak",
    "gnome-software",
    "gnome-software-plugin-flatpak",
    "preload",
    "gnome-shell",
    "gnome-shell-extensions",
    "software-properties-common",
    "libvlc-dev",
    "ffmpeg",
    "stacer",
]


class SystemUpdateStep:
    step_id = "10_system_update"
    title = "Updating system & installing base packages"

    def run(self, ctx: SetupCtx) -> None:
        ctx.policy.try_or_continue(apt_update())
        ctx.policy.try_or_continue(apt("upgrade", "-y"))
        ctx.policy.try_or_continue(apt_install(BASE_PACKAGES))
