from abc import ABC, abstractmethod

from kiln_core.log import get_logger
from kiln_core.models.finding import FindingKind
from kiln_core.validation.layout import ProjectLayout
from kiln_core.validation.probes import ExternalProbe
from kiln_core.validation.store import FindingStore


class BaseStage(ABC):
    CATEGORY: str = ""
    TITLE: str = ""

    def __init__(self, layout: ProjectLayout, probe: ExternalProbe):
        self.layout = layout
        self.probe = probe
        self.logger = get_logger(f"stages.{self.CATEGORY}")

    def run(self, store: FindingStore) -> None:
        """Run every check of this stage; an unexpected error becomes one FAIL finding."""
        self.logger.info("%s validation", self.TITLE)
        try:
            self.check(store)
        except Exception as e:
            self.logger.debug("%s validation aborted", self.TITLE, exc_info=True)
            self.fail(store, f"{self.TITLE} validation error: {e}", kind="unexpected_error")

    @abstractmethod
    def check(self, store: FindingStore) -> None:
        """Inspect the project tree and record findings."""
        ...

    def ok(self, store: FindingStore, message: str) -> None:
        self.logger.debug("ok: %s", message)
        store.record("PASS", self.CATEGORY, message)

    def warn(self, store: FindingStore, message: str, fix: str | None = None, *, kind: FindingKind) -> None:
        self.logger.debug("warn: %s", message)
        store.record("WARN", self.CATEGORY, message, fix=fix, kind=kind)

    def fail(self, store: FindingStore, message: str, fix: str | None = None, *, kind: FindingKind) -> None:
        self.logger.debug("fail: %s", message)
        store.record("FAIL", self.CATEGORY, message, fix=fix, kind=kind)
