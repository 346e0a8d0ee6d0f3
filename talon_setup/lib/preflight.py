from __future__ import annotations

import logging
import os
import pwd
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvokingUser:
    """The non-privileged account that ran sudo (name is None when run as plain root)."""

    name: Optional[str]
    home: str


def is_privileged() -> bool:
    return os.geteuid() == 0


def resolve_invoking_user(environ: Mapping[str, str] | None = None) -> InvokingUser:
    """Resolve SUDO_USER and its home directory from the password database.

    User-scoped installs (Flatpak apps) are run as this user so files in its
    home end up with the right ownership.
    """

    env = os.environ if environ is None else environ
    name = (env.get("SUDO_USER") or "").strip()

    if not name or name == "root":
        home = pwd.getpwuid(os.geteuid()).pw_dir
        logger.warning("SUDO_USER not set; user-scoped installs will run as root (home=%s)", home)
        return InvokingUser(name=None, home=home)

    try:
        entry = pwd.getpwnam(name)
    except KeyError:
        home = os.path.expanduser(f"~{name}")
        logger.warning("User %s not found in passwd; assuming home %s", name, home)
        return InvokingUser(name=name, home=home)

    logger.info("Invoking user %s (home=%s)", name, entry.pw_dir)
    return InvokingUser(name=name, home=entry.pw_dir)
