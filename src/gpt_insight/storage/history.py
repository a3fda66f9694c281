"""
Persistent diagnosis history.

One JSON file holds a mapping from person name to that person's latest
DiagnosticResult under the fixed key ``gpt_insight_reports``.  Writes are
last-write-wins by name.  Anything unreadable on disk degrades to an empty
(or partial) history instead of raising.
"""

from __future__ import annotations

import json
import os
from typing import Dict, List, Optional

import structlog

from ..analysis.diagnosis import DiagnosticResult
from ..config.settings import HISTORY_BASE_DIR, HISTORY_DIR_NAME, HISTORY_FILE_NAME, STORAGE_KEY

logger = structlog.get_logger()


def default_history_path() -> str:
    return os.path.join(HISTORY_BASE_DIR, HISTORY_DIR_NAME, HISTORY_FILE_NAME)


class HistoryStore:
    """Name-keyed store of the most recent result per person."""

    def __init__(self, path: Optional[str] = None):
        self.path = path or default_history_path()
        self._results: Dict[str, DiagnosticResult] = {}

    # -- reading -------------------------------------------------------------

    def load(self) -> "HistoryStore":
        """Replace in-memory contents with what is on disk (best effort)."""
        self._results = {}
        if not os.path.exists(self.path):
            return self

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError, RecursionError) as exc:
            logger.warning("history_unreadable", path=self.path, error=str(exc))
            return self

        for entry in self._entries(raw):
            result = DiagnosticResult.from_dict(entry)
            if result is None:
                logger.warning("history_entry_skipped", path=self.path)
                continue
            self._results[result.name] = result

        logger.info("history_loaded", path=self.path, count=len(self._results))
        return self

    @staticmethod
    def _entries(raw) -> List:
        # {"gpt_insight_reports": {name: result}} is the native layout; a bare
        # list of results is what the browser version kept in localStorage.
        if isinstance(raw, dict):
            raw = raw.get(STORAGE_KEY, raw)
        if isinstance(raw, dict):
            return list(raw.values())
        if isinstance(raw, list):
            return raw
        logger.warning("history_unexpected_shape", type=type(raw).__name__)
        return []

    def get(self, name: str) -> Optional[DiagnosticResult]:
        return self._results.get(name)

    def names(self) -> List[str]:
        return list(self._results)

    def results(self) -> List[DiagnosticResult]:
        return list(self._results.values())

    def __len__(self) -> int:
        return len(self._results)

    def __contains__(self, name: str) -> bool:
        return name in self._results

    # -- writing -------------------------------------------------------------

    def put(self, result: DiagnosticResult) -> None:
        """Store *result*, replacing any earlier result with the same name.

        The file is written first; if that fails the in-memory history is
        left as it was and the OSError propagates.
        """
        replaced = result.name in self._results
        candidate = dict(self._results)
        candidate[result.name] = result
        self._write(candidate)
        self._results = candidate
        logger.info("history_saved", name=result.name, replaced=replaced)

    def save(self) -> None:
        self._write(self._results)

    def _write(self, results: Dict[str, DiagnosticResult]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        payload = {STORAGE_KEY: {name: r.to_dict() for name, r in results.items()}}
        text = json.dumps(payload, ensure_ascii=False, indent=2)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)
