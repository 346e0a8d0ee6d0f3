from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_LOG_PATH = "setup.log"
DEFAULT_FLATPAK_REMOTE = "flathub"
DEFAULT_FLATPAK_REMOTE_URL = "https://dl.flathub.org/repo/flathub.flatpakrepo"


@dataclass(frozen=True)
class SetupConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def log_path(self) -> str:
        return str(self.raw.get("log_path") or DEFAULT_LOG_PATH)

    @property
    def dry_run(self) -> bool:
        return bool(self.raw.get("dry_run", False))

    @property
    def max_prompt_attempts(self) -> Optional[int]:
        value = (self.raw.get("prompt") or {}).get("max_attempts")
        if value is None:
            return None
        n = int(value)
        if n < 1:
            raise ValueError("prompt.max_attempts must be >= 1 (or null for unbounded)")
        return n

    @property
    def flatpak_remote(self) -> str:
        return str(((self.raw.get("flatpak") or {}).get("remote")) or DEFAULT_FLATPAK_REMOTE)

    @property
    def flatpak_remote_url(self) -> str:
        return str(((self.raw.get("flatpak") or {}).get("remote_url")) or DEFAULT_FLATPAK_REMOTE_URL)

    @property
    def skip_steps(self) -> List[str]:
        return [str(s) for s in ((self.raw.get("steps") or {}).get("skip") or [])]

    def with_overrides(self, **overrides: Any) -> "SetupConfig":
        """Return a copy with command-line values layered over the file values."""
        raw = dict(self.raw)
        for key, value in overrides.items():
            if value is None:
                continue
            if key == "max_attempts":
                raw["prompt"] = dict(raw.get("prompt") or {}, max_attempts=value)
            elif key == "skip":
                steps = dict(raw.get("steps") or {})
                steps["skip"] = [*(steps.get("skip") or []), *value]
                raw["steps"] = steps
            else:
                raw[key] = value
        return SetupConfig(raw=raw)


def load_setup_config(path: Optional[str]) -> SetupConfig:
    if path is None:
        return SetupConfig()

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("setup config must be YAML")

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping/object")

    return SetupConfig(raw=raw)
