from __future__ import annotations

import logging

from ..context import SetupCtx
from ..lib.command import Command
from ..lib.pkg import apt_install, apt_update, fetch, run_remote_script, write_apt_source

logger = logging.getLogger(__name__)

NODESOURCE_SETUP_SCRIPT = "https://deb.nodesource.com/setup_20.x"

MICROSOFT_KEY_URL = "https://packages.microsoft.com/keys/microsoft.asc"
MICROSOFT_KEYRING = "/usr/share/keyrings/packages.microsoft.gpg"
VSCODE_SOURCES_LIST = "/etc/apt/sources.list.d/vscode.list"
VSCODE_APT_LINE = (
    f"deb [arch=amd64 signed-by={MICROSOFT_KEYRING}] https://packages.microsoft.com/repos/code stable main"
)


def install_node(ctx: SetupCtx) -> None:
    logger.info("Installing Node.js & npm...")
    ctx.policy.try_or_continue(run_remote_script(NODESOURCE_SETUP_SCRIPT, shell=("bash", "-")))
    ctx.policy.try_or_continue(apt_install(["nodejs"]))


def install_python(ctx: SetupCtx) -> None:
    logger.info("Installing Python...")
    ctx.policy.try_or_continue(apt_install(["python3", "python3-pip", "python3-venv"]))


def install_vscode(ctx: SetupCtx) -> None:
    logger.info("Installing Visual Studio Code...")
    dearmor = Command(("gpg", "--dearmor", "--yes", "-o", MICROSOFT_KEYRING), stdin_from=fetch(MICROSOFT_KEY_URL))
    ctx.policy.try_or_continue(dearmor)
    ctx.policy.try_or_continue(write_apt_source(VSCODE_SOURCES_LIST, VSCODE_APT_LINE))
    ctx.policy.try_or_continue(apt_update())
    ctx.policy.try_or_continue(apt_install(["code"]))


class DeveloperToolsStep:
    step_id = "60_developer_tools"
    title = "Developer Tools Installation"

    def run(self, ctx: SetupCtx) -> None:
        if ctx.selector.ask("Install Node.js & npm?"):
            install_node(ctx)
        if ctx.selector.ask("Install Python?"):
            install_python(ctx)
        if ctx.selector.ask("Install Visual Studio Code?"):
            install_vscode(ctx)
