"""
Runtime settings for kiln.

Environment flags (all optional):

    KILN_SYNTAX_COMMAND = "terraform validate"
        Command run inside infra/ to check Terraform syntax (shell-split).

    KILN_SYNTAX_TIMEOUT = seconds
        Upper bound on the syntax check. Unset, invalid, or <= 0 means wait
        indefinitely.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, replace

DEFAULT_SYNTAX_COMMAND: tuple[str, ...] = ("terraform", "validate")


def _env_command(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return tuple(shlex.split(val))


def _env_timeout(name: str) -> float | None:
    val = os.getenv(name)
    if val is None:
        return None
    try:
        out = float(val)
    except ValueError:
        return None
    return out if out > 0 else None


@dataclass(frozen=True)
class KilnSettings:
    syntax_command: tuple[str, ...] = DEFAULT_SYNTAX_COMMAND
    syntax_timeout_s: float | None = None

    @classmethod
    def from_env(cls) -> "KilnSettings":
        return cls(
            syntax_command=_env_command("KILN_SYNTAX_COMMAND", DEFAULT_SYNTAX_COMMAND),
            syntax_timeout_s=_env_timeout("KILN_SYNTAX_TIMEOUT"),
        )

    def with_timeout(self, timeout_s: float | None) -> "KilnSettings":
        if timeout_s is None:
            return self
        return replace(self, syntax_timeout_s=timeout_s if timeout_s > 0 else None)
