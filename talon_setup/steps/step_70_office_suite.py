from __future__ import annotations

import logging

from ..context import SetupCtx
from ..lib.pkg import apt, apt_install, download
from ..lib.workdir import scoped_workdir

logger = logging.getLogger(__name__)

LIBREOFFICE_APP_ID = "org.libreoffice.LibreOffice"
ONLYOFFICE_DEB_URL = (
    "https://download.onlyoffice.com/install/desktop/editors/linux/onlyoffice-desktopeditors_amd64.deb"
)


def install_libreoffice(ctx: SetupCtx) -> None:
    logger.info("Installing LibreOffice...")
    ctx.policy.try_or_continue(ctx.flatpak_app(LIBREOFFICE_APP_ID), apt_install(["libreoffice"]))


def install_onlyoffice(ctx: SetupCtx) -> None:
    logger.info("Installing OnlyOffice...")
    deb_name = ONLYOFFICE_DEB_URL.rsplit("/", 1)[-1]
    with scoped_workdir(prefix="onlyoffice-") as tmp:
        ctx.policy.try_or_continue(download(ONLYOFFICE_DEB_URL, cwd=tmp))
        ctx.policy.try_or_continue(apt("install", "-y", f"./{deb_name}").in_dir(tmp))


OFFICE_SUITES = {
    "LibreOffice": install_libreoffice,
    "OnlyOffice": install_onlyoffice,
}


class OfficeSuiteStep:
    step_id = "70_office_suite"
    title = "Office suite"

    def run(self, ctx: SetupCtx) -> None:
        choice = ctx.selector.choose("Choose an Office suite to install:", list(OFFICE_SUITES))
        if choice is None:
            logger.info("No office suite selected; skipping.")
            return
        OFFICE_SUITES[choice](ctx)
