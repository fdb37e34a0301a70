"""
Progress storage.

The progress map lives on the visitor's device. The engine only sees this
port: load() once at start, save() with the full map after every change.
Nothing read from storage is trusted; bad content degrades to an empty map.
"""
import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from ...models.catalog import Progress, ProgressMap

logger = logging.getLogger(__name__)

PROGRESS_KEY = "fixProgress"

FIX_PROGRESS_PATH = os.getenv(
    "FIX_PROGRESS_PATH",
    str(Path.home() / ".ecom_fixes" / "progress.json"),
)


class ProgressStorage(Protocol):
    def load(self) -> ProgressMap:
        ...

    def save(self, progress_map: ProgressMap) -> None:
        ...


# =============================================================================
# (DE)SERIALIZATION
# =============================================================================

def serialize_progress(progress_map: ProgressMap) -> Dict[str, str]:
    """JSON-ready form: string ids in ascending order mapped to labels."""
    return {str(fix_id): progress_map[fix_id].value for fix_id in sorted(progress_map)}


def parse_progress(raw, valid_ids=None) -> ProgressMap:
    """
    Rebuild a progress map from decoded JSON.

    A non-object payload yields an empty map. Entries whose id is not an
    integer (or not in valid_ids, when given) or whose label is unknown are
    dropped.
    """
    if not isinstance(raw, dict):
        logger.warning(f"Ignoring stored progress of type {type(raw).__name__}")
        return {}

    progress_map: ProgressMap = {}
    for key, label in raw.items():
        try:
            fix_id = int(key)
            progress = Progress(label)
        except (TypeError, ValueError):
            logger.debug(f"Dropping stored progress entry {key!r}: {label!r}")
            continue
        if valid_ids is not None and fix_id not in valid_ids:
            logger.debug(f"Dropping progress for unknown fix {fix_id}")
            continue
        progress_map[fix_id] = progress
    return progress_map


# =============================================================================
# BACKENDS
# =============================================================================

class InMemoryProgressStorage:
    """Keeps the serialized map in memory. Used by tests and throwaway sessions."""

    def __init__(self, initial: Optional[str] = None):
        self.raw = initial
        self.save_count = 0

    def load(self) -> ProgressMap:
        if self.raw is None:
            return {}
        try:
            return parse_progress(json.loads(self.raw))
        except ValueError as e:
            logger.warning(f"Stored progress is not valid JSON, starting fresh: {e}")
            return {}

    def save(self, progress_map: ProgressMap) -> None:
        self.raw = json.dumps(serialize_progress(progress_map))
        self.save_count += 1


class JsonFileProgressStorage:
    """
    Progress persisted to a JSON file on the visitor's machine.

    The file holds one object under the "fixProgress" key. Other keys are
    preserved on save.
    """

    def __init__(self, path: Union[str, Path] = FIX_PROGRESS_PATH):
        self.path = Path(path)

    def _read_document(self) -> dict:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError as e:
            logger.warning(f"Progress file {self.path} is not UTF-8, starting fresh: {e}")
            return {}
        except OSError as e:
            logger.warning(f"Could not read progress file {self.path}: {e}")
            return {}

        try:
            document = json.loads(text)
        except ValueError as e:
            logger.warning(f"Progress file {self.path} is corrupt, starting fresh: {e}")
            return {}

        if not isinstance(document, dict):
            logger.warning(f"Progress file {self.path} has no top-level object, starting fresh")
            return {}
        return document

    def load(self) -> ProgressMap:
        document = self._read_document()
        if PROGRESS_KEY not in document:
            return {}
        return parse_progress(document[PROGRESS_KEY])

    def save(self, progress_map: ProgressMap) -> None:
        document = self._read_document()
        document[PROGRESS_KEY] = serialize_progress(progress_map)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)
