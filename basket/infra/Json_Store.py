"""JSON file persistence shared by the repositories.

Each data file holds a JSON list of records. Writes go to a temp file in the
same directory and are moved over the original, so readers never see a half
written file. Every file has its own re-entrant lock; repositories hold it
across a read-modify-write.
"""
import json
import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from decimal import Decimal
from pathlib import Path
from threading import Lock, RLock
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from basket.logic.pricing.money import money_str

logger = logging.getLogger(__name__)

_locks: Dict[str, RLock] = {}
_locks_guard = Lock()


def _lock_for(path: Path) -> RLock:
    key = str(Path(path).resolve())
    with _locks_guard:
        lock = _locks.get(key)
        if lock is None:
            lock = _locks[key] = RLock()
        return lock


@contextmanager
def locked(path: Path) -> Iterator[None]:
    with _lock_for(path):
        yield


def _json_default(value: Any):
    if isinstance(value, Decimal):
        return money_str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def read_records(path: Path) -> List[dict]:
    """Load the record list stored at ``path``; missing or unreadable files read as empty."""
    path = Path(path)
    if not path.exists():
        return []
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        logger.error("Could not read %s: %s", path, e)
        return []
    if not isinstance(data, list):
        logger.error("Expected a list in %s, found %s", path, type(data).__name__)
        return []
    return [entry for entry in data if isinstance(entry, dict)]


def write_records(path: Path, records: List[dict]) -> None:
    path = Path(path)
    os.makedirs(path.parent, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(records, tmp, indent=2, ensure_ascii=False, default=_json_default)
        shutil.move(tmp_path, str(path))
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


T = TypeVar("T")


class JsonRepository(Generic[T]):
    """Base repository over one JSON data file.

    Subclasses provide ``_path()`` and ``_from_dict``; entities expose ``id`` and ``to_dict()``.
    """

    def _path(self) -> Path:
        raise NotImplementedError

    def _from_dict(self, data: dict) -> T:
        raise NotImplementedError

    def _load(self) -> List[T]:
        return [self._from_dict(entry) for entry in read_records(self._path())]

    def _store(self, entities: List[T]) -> None:
        write_records(self._path(), [e.to_dict() for e in entities])

    def transaction(self):
        """Hold this repository's file lock across several calls."""
        return locked(self._path())

    def all(self) -> List[T]:
        with locked(self._path()):
            return self._load()

    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        return [e for e in self.all() if predicate(e)]

    def get(self, entity_id: str) -> Optional[T]:
        for e in self.all():
            if e.id == entity_id:
                return e
        return None

    def add(self, entity: T) -> T:
        with locked(self._path()):
            entities = self._load()
            entities.append(entity)
            self._store(entities)
        return entity

    def save(self, entity: T) -> T:
        """Replace the stored record with the same id (appends when missing)."""
        with locked(self._path()):
            entities = self._load()
            for i, existing in enumerate(entities):
                if existing.id == entity.id:
                    entities[i] = entity
                    break
            else:
                entities.append(entity)
            self._store(entities)
        return entity

    def delete_where(self, predicate: Callable[[T], bool]) -> List[T]:
        """Remove every matching record; returns the removed entities."""
        with locked(self._path()):
            entities = self._load()
            kept = [e for e in entities if not predicate(e)]
            removed = [e for e in entities if predicate(e)]
            if removed:
                self._store(kept)
        return removed
