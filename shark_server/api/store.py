# shark_server/api/store.py
"""
In-memory people store backing the GraphQL resolvers.

The store owns an ordered list of Record objects loaded once from a JSON seed
(shark_server/api/db/people.json by default). Records are never created or
deleted at runtime; only name and age change through update_by_id.

Public API:
- RecordStore.default(), RecordStore.from_file(path)
- get_by_id(id), list_by_tag(tag), update_by_id(id, name, age)
- all(), len(store), iteration
"""
from __future__ import annotations
import json
import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, Iterator, List, Optional

from shark_server.api.settings import DEFAULT_SEED_PATH
from shark_server.api.utils.logger import write_log, log_person_event


class SeedError(ValueError):
    """Raised when a seed file is missing or holds a malformed entry."""


@dataclass
class Record:
    id: int
    name: str
    age: Optional[str]
    tag: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Record":
        if not isinstance(data, dict):
            raise SeedError(f"seed entry must be an object, got {type(data).__name__}")
        missing = [key for key in ("id", "name", "age", "tag") if key not in data]
        if missing:
            raise SeedError(f"seed entry {data!r} is missing {', '.join(missing)}")
        try:
            record_id = int(data["id"])
        except (TypeError, ValueError):
            raise SeedError(f"seed entry id {data['id']!r} is not an integer")
        age = data["age"]
        return cls(
            id=record_id,
            name=str(data["name"]),
            age=None if age is None else str(age),
            tag=str(data["tag"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_seed(path: str) -> List[Record]:
    if not os.path.exists(path):
        raise SeedError(f"seed file not found: {path}")
    with open(path) as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise SeedError(f"seed file {path} is not valid JSON: {e}")
    if not isinstance(raw, list):
        raise SeedError(f"seed file {path} must hold a JSON array")
    return [Record.from_dict(entry) for entry in raw]


class RecordStore:
    def __init__(self, records: Iterable[Record]):
        self._records: List[Record] = list(records)

    @classmethod
    def from_file(cls, path: str) -> "RecordStore":
        store = cls(load_seed(path))
        write_log({"event": "store_loaded", "seed_path": path, "records": len(store)}, stream="store")
        return store

    @classmethod
    def default(cls) -> "RecordStore":
        return cls.from_file(DEFAULT_SEED_PATH)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def all(self) -> List[Record]:
        return list(self._records)

    def get_by_id(self, record_id: int) -> Optional[Record]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def list_by_tag(self, tag: Optional[str] = None) -> List[Record]:
        # empty tag behaves like no filter
        if not tag:
            return self.all()
        return [record for record in self._records if record.tag == tag]

    def update_by_id(self, record_id: int, name: str, age: Optional[str] = None) -> Optional[Record]:
        """
        Overwrite name and age of the first record with a matching id.
        age=None clears the field. Returns the updated record, or None when
        no record has that id (the store is left untouched).
        """
        record = self.get_by_id(record_id)
        if record is None:
            log_person_event("person_update_missed", record_id)
            return None
        previous = {"name": record.name, "age": record.age}
        record.name = name
        record.age = age
        log_person_event("person_updated", record_id, previous=previous, name=name, age=age)
        return record
