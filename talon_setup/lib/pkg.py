from __future__ import annotations

from typing import Sequence

from .command import Command

APT_ENV = {"DEBIAN_FRONTEND": "noninteractive"}
# Keep existing conffiles instead of asking.
APT_DPKG_OPTIONS = ("-o", "Dpkg::Options::=--force-confdef", "-o", "Dpkg::Options::=--force-confold")


def apt(*args: str) -> Command:
    return Command(("apt-get", *APT_DPKG_OPTIONS, *args), env=APT_ENV)


def apt_update() -> Command:
    return apt("update")


def apt_install(packages: Sequence[str]) -> Command:
    if not packages:
        raise ValueError("apt_install needs at least one package")
    return apt("install", "-y", *packages)


def apt_remove(packages: Sequence[str], *, purge: bool = False) -> Command:
    argv = ["remove", "-y"]
    if purge:
        argv.append("--purge")
    return apt(*argv, *packages)


def dpkg_installed(package: str) -> Command:
    """Precondition: met only when the deb is fully installed (not just config-files)."""
    return Command(("dpkg-query", "-W", "-f=${db:Status-Status}", package), expect_output="installed")


def add_apt_repository(repo: str) -> Command:
    return Command(("add-apt-repository", "-y", repo), env=APT_ENV)


def write_apt_source(path: str, line: str) -> Command:
    """Write a one-line sources.list.d entry through tee."""
    return Command(("tee", path), input_text=line.rstrip("\n") + "\n")


def snap_installed(name: str) -> Command:
    return Command(("snap", "list", name))


def snap_remove(name: str) -> Command:
    return Command(("snap", "remove", "--purge", name)).when(snap_installed(name))


def flatpak_remote_add(name: str, url: str) -> Command:
    return Command(("flatpak", "remote-add", "--if-not-exists", name, url))


def flatpak_install(app_id: str, *, remote: str = "flathub") -> Command:
    return Command(("flatpak", "install", "-y", "--noninteractive", remote, app_id))


def fetch(url: str, *, follow_redirects: bool = True) -> Command:
    """curl a URL to stdout; used as the stdin producer for install scripts."""
    return Command(("curl", "-fsSL" if follow_redirects else "-fsS", url))


def run_remote_script(url: str, shell: Sequence[str] = ("sh",), *, follow_redirects: bool = True) -> Command:
    return Command(tuple(shell), stdin_from=fetch(url, follow_redirects=follow_redirects))


def download(url: str, *, cwd: str) -> Command:
    return Command(("wget", "-q", url), cwd=cwd)
