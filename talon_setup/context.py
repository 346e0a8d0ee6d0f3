from __future__ import annotations

from dataclasses import dataclass

from .config import SetupConfig
from .lib.command import Command
from .lib.pkg import flatpak_install
from .lib.policy import ExecutionPolicy
from .lib.preflight import InvokingUser
from .lib.prompt import Selector


@dataclass(frozen=True)
class SetupCtx:
    cfg: SetupConfig
    policy: ExecutionPolicy
    selector: Selector
    user: InvokingUser

    def user_scoped(self, command: Command) -> Command:
        """Run command as the invoking user (no-op when there is none)."""
        if not self.user.name:
            return command
        return command.as_user(self.user.name, self.user.home)

    def flatpak_app(self, app_id: str) -> Command:
        return self.user_scoped(flatpak_install(app_id, remote=self.cfg.flatpak_remote))

    def install_flatpak_app(self, app_id: str) -> None:
        self.policy.try_or_continue(self.flatpak_app(app_id))
