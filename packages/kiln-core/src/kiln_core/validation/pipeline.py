from __future__ import annotations

from pathlib import Path

from kiln_core.log import get_logger
from kiln_core.settings import KilnSettings
from kiln_core.validation.layout import ProjectLayout
from kiln_core.validation.probes import ExternalProbe
from kiln_core.validation.stages import (
    ApplicationStructureStage,
    ConfigurationStage,
    DeployPipelineStage,
    GatewayConfigStage,
    InfrastructureStage,
)
from kiln_core.validation.store import FindingStore

logger = get_logger("pipeline")

# Order only affects report readability; stages never read each other's findings.
STAGES = (
    ConfigurationStage,
    InfrastructureStage,
    ApplicationStructureStage,
    GatewayConfigStage,
    DeployPipelineStage,
)


def build_probe(settings: KilnSettings | None = None) -> ExternalProbe:
    settings = settings or KilnSettings.from_env()
    return ExternalProbe(command=settings.syntax_command, timeout_s=settings.syntax_timeout_s)


def run_validation(root: Path | str = Path("."), probe: ExternalProbe | None = None) -> FindingStore:
    """
    Top-level project validation.

    Runs every stage against the tree at `root` and returns the populated store.
    """
    layout = ProjectLayout.at(root)
    probe = probe or build_probe()
    store = FindingStore()

    logger.info("Validating project at %s", layout.root.resolve())
    for stage_cls in STAGES:
        stage_cls(layout, probe).run(store)

    counts = store.counts()
    logger.info("Validation finished: %d passed, %d warnings, %d failed", counts["pass"], counts["warn"], counts["fail"])
    return store


def exit_status(store: FindingStore) -> int:
    """1 when anything failed, else 0. Warnings never change the status."""
    return 1 if store.has_failures else 0
