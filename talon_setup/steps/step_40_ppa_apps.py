from __future__ import annotations

from ..context import SetupCtx
from ..lib.pkg import add_apt_repository, apt_install, apt_update


class PPAInstallStep:
    """Add a PPA, refresh the index and install one package from it."""

    step_id = ""
    title = ""
    ppa = ""
    package = ""

    def run(self, ctx: SetupCtx) -> None:
        ctx.policy.try_or_continue(add_apt_repository(self.ppa))
        ctx.policy.try_or_continue(apt_update())
        ctx.policy.try_or_continue(apt_install([self.package]))


class TimeshiftStep(PPAInstallStep):
    step_id = "40_timeshift"
    title = "Installing Timeshift"
    ppa = "ppa:teejee2008/timeshift"
    package = "timeshift"


class FSearchStep(PPAInstallStep):
    step_id = "45_fsearch"
    title = "Installing FSearch"
    ppa = "ppa:christian-boxdoerfer/fsearch-stable"
    package = "fsearch"
