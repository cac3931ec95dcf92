"""Client settings resolved from ``TEXTAN_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "TEXTAN_"

SAMPLE_TEXT = (
    "Ahoj, toto je testovaci zprava urcena pro vyzkouseni vsech moznosti "
    "oznacovani textu."
)


def _flag(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Options shared by the wizard steps and the Textual host."""

    sample_text: str = SAMPLE_TEXT
    preserve_on_press: bool = False
    log_preset: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientSettings":
        env = os.environ if environ is None else environ
        return cls(
            sample_text=env.get(f"{ENV_PREFIX}SAMPLE_TEXT", SAMPLE_TEXT),
            preserve_on_press=_flag(env.get(f"{ENV_PREFIX}PRESERVE_ON_PRESS"), False),
            log_preset=env.get(f"{ENV_PREFIX}LOG_PRESET") or None,
        )


__all__ = ["ClientSettings", "ENV_PREFIX", "SAMPLE_TEXT"]
