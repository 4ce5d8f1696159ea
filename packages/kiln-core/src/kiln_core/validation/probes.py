"""
Adapters for the outside world the Infrastructure stage depends on: the
Terraform syntax validator and the process environment.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping
from pathlib import Path

from kiln_core.log import get_logger
from kiln_core.settings import DEFAULT_SYNTAX_COMMAND

logger = get_logger("probes")


class ExternalProbe:
    def __init__(
        self,
        command: tuple[str, ...] = DEFAULT_SYNTAX_COMMAND,
        timeout_s: float | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        self.command = tuple(command)
        self.timeout_s = timeout_s
        self.environ = os.environ if environ is None else environ

    def syntax_check(self, directory: Path) -> bool:
        """Run the syntax validator in `directory`; only its exit status is kept."""
        logger.debug("Running %s in %s (timeout=%s)", " ".join(self.command), directory, self.timeout_s)
        try:
            result = subprocess.run(
                list(self.command),
                cwd=directory,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout_s,
                check=False,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired, OSError) as e:
            logger.debug("Syntax check could not complete: %s", e)
            return False
        return result.returncode == 0

    def env_is_set(self, name: str) -> bool:
        return bool(self.environ.get(name))
