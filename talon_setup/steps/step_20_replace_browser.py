from __future__ import annotations

import logging
from typing import Callable, Dict

from ..context import SetupCtx
from ..lib.command import Command
from ..lib.pkg import apt_remove, dpkg_installed, run_remote_script, snap_remove

logger = logging.getLogger(__name__)

FIREFOX_LEFTOVERS = [
    "/etc/firefox",
    "/usr/lib/firefox",
    "/usr/lib/firefox-addons",
    "/usr/share/firefox",
    "/usr/share/firefox-addons",
]

BRAVE_INSTALL_SCRIPT = "https://dl.brave.com/install.sh"
LIBREWOLF_APP_ID = "io.gitlab.librewolf-community"


def remove_firefox(ctx: SetupCtx) -> None:
    logger.info("Removing Firefox...")
    ctx.policy.try_or_continue(snap_remove("firefox"))
    ctx.policy.try_or_continue(apt_remove(["firefox"], purge=True).when(dpkg_installed("firefox")))
    ctx.policy.try_or_continue(Command(("rm", "-rf", *FIREFOX_LEFTOVERS)))


def install_brave(ctx: SetupCtx) -> None:
    logger.info("Installing Brave Browser...")
    ctx.policy.try_or_continue(run_remote_script(BRAVE_INSTALL_SCRIPT, follow_redirects=False))


def install_librewolf(ctx: SetupCtx) -> None:
    logger.info("Installing LibreWolf via Flatpak...")
    ctx.install_flatpak_app(LIBREWOLF_APP_ID)


BROWSERS: Dict[str, Callable[[SetupCtx], None]] = {
    "Brave": install_brave,
    "LibreWolf": install_librewolf,
}


class ReplaceBrowserStep:
    step_id = "20_replace_browser"
    title = "Firefox replacement"

    def run(self, ctx: SetupCtx) -> None:
        if not ctx.selector.ask("Do you want to replace Firefox?"):
            logger.info("Keeping Firefox.")
            return

        choice = ctx.selector.choose("Choose a replacement browser:", list(BROWSERS))
        if choice is None:
            logger.info("No browser selected; keeping Firefox.")
            return

        remove_firefox(ctx)
        BROWSERS[choice](ctx)
