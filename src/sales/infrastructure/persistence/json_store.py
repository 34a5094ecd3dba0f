"""JSON-file-backed document store with optimistic transactions.

The whole store is one JSON document::

    {"<collection>": {"<key>": {"version": 3, "data": {...}}}}

Every committed write bumps the record's version.  A SERIALIZABLE
transaction reads from a snapshot taken when it begins and, at commit,
checks under the store lock that every record it read or wrote still has
the version it saw.  If another transaction got there first, the commit
raises TransactionConflictError and writes nothing.  READ_COMMITTED
transactions read the latest committed data and commit without checks.

Every access holds an exclusive ``flock`` on a sidecar ``.lock`` file, so
separate processes (each CLI call is one) and separate JsonStore
instances serialize their load, validate and persist steps.  Commits go
through a uniquely named temp file and ``os.replace``, so readers never
see half a commit.
"""

from __future__ import annotations

import copy
import fcntl
import json
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog

from sales.application.exceptions import TransactionConflictError
from sales.application.unit_of_work import Isolation

logger = structlog.get_logger(__name__)

RecordKey = tuple[str, str]


class JsonSession(ABC):
    """What a JSON repository needs: keyed access to plain dicts."""

    @abstractmethod
    def get(self, collection: str, key: str) -> dict | None:
        """Return the record's data, or None if absent."""

    @abstractmethod
    def all(self, collection: str) -> list[dict]:
        """Return the data of every record in a collection."""

    @abstractmethod
    def put(self, collection: str, key: str, data: dict) -> None:
        """Insert or replace a record."""


class JsonStore(JsonSession):
    """The store itself.  Used directly, every ``put`` commits at once."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock_path = file_path.with_name(file_path.name + ".lock")
        self._lock = threading.Lock()
        self._ensure_file()

    # --- Autocommit session ---------------------------------------------------

    def get(self, collection: str, key: str) -> dict | None:
        return self.read_record(collection, key)[1]

    def all(self, collection: str) -> list[dict]:
        return [data for _, data in self.read_collection(collection).values()]

    def put(self, collection: str, key: str, data: dict) -> None:
        with self._locked():
            records = self._load_raw()
            self._write_record(records, collection, key, data)
            self._persist_raw(records)

    # --- Transactions ---------------------------------------------------------

    def begin(self, isolation: Isolation) -> JsonTransaction:
        return JsonTransaction(self, isolation)

    def snapshot(self) -> dict:
        with self._locked():
            return self._load_raw()

    def read_record(self, collection: str, key: str) -> tuple[int, dict | None]:
        with self._locked():
            records = self._load_raw()
        return _version_and_data(records, collection, key)

    def read_collection(self, collection: str) -> dict[str, tuple[int, dict]]:
        with self._locked():
            records = self._load_raw()
        return _collection_view(records, collection)

    def apply(self, expected: dict[RecordKey, int], writes: dict[RecordKey, dict]) -> None:
        """Validate *expected* versions, then write *writes*, atomically."""
        with self._locked():
            records = self._load_raw()
            for (collection, key), version in expected.items():
                current, _ = _version_and_data(records, collection, key)
                if current != version:
                    logger.warning(
                        "Serialization conflict",
                        collection=collection,
                        key=key,
                        expected_version=version,
                        current_version=current,
                    )
                    raise TransactionConflictError(
                        f"Concurrent update of {collection} record {key}; retry the operation"
                    )
            if not writes:
                return
            for (collection, key), data in writes.items():
                self._write_record(records, collection, key, data)
            self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    @staticmethod
    def _write_record(records: dict, collection: str, key: str, data: dict) -> None:
        bucket = records.setdefault(collection, {})
        version = bucket.get(key, {}).get("version", 0)
        bucket[key] = {"version": version + 1, "data": data}

    def _load_raw(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: dict) -> None:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self._file_path.parent,
            prefix=self._file_path.name + ".",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp.write(json.dumps(records, indent=2) + "\n")
        try:
            os.replace(tmp.name, self._file_path)
        except OSError:
            os.unlink(tmp.name)
            raise

    @contextmanager
    def _locked(self) -> Iterator[None]:
        """Hold the in-process lock and the cross-process file lock."""
        with self._lock, open(self._lock_path, "a") as lock_file:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)

    def _ensure_file(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with self._locked():
            if not self._file_path.exists():
                self._persist_raw({})


class JsonTransaction(JsonSession):
    """Buffers writes until ``commit()``; see the module docstring."""

    def __init__(self, store: JsonStore, isolation: Isolation) -> None:
        self._store = store
        self.isolation = isolation
        self._snapshot = store.snapshot() if isolation is Isolation.SERIALIZABLE else None
        self._read_versions: dict[RecordKey, int] = {}
        self._writes: dict[RecordKey, dict] = {}

    def get(self, collection: str, key: str) -> dict | None:
        if (collection, key) in self._writes:
            return copy.deepcopy(self._writes[(collection, key)])

        if self._snapshot is not None:
            version, data = _version_and_data(self._snapshot, collection, key)
        else:
            version, data = self._store.read_record(collection, key)
        self._read_versions.setdefault((collection, key), version)
        return copy.deepcopy(data)

    def all(self, collection: str) -> list[dict]:
        if self._snapshot is not None:
            stored = _collection_view(self._snapshot, collection)
        else:
            stored = self._store.read_collection(collection)

        result: dict[str, dict] = {}
        for key, (version, data) in stored.items():
            self._read_versions.setdefault((collection, key), version)
            result[key] = data
        for (written_collection, key), data in self._writes.items():
            if written_collection == collection:
                result[key] = data
        return [copy.deepcopy(data) for data in result.values()]

    def put(self, collection: str, key: str, data: dict) -> None:
        self._writes[(collection, key)] = copy.deepcopy(data)

    def commit(self) -> None:
        expected: dict[RecordKey, int] = {}
        if self._snapshot is not None:
            expected.update(self._read_versions)
            for collection, key in self._writes:
                if (collection, key) not in expected:
                    expected[(collection, key)] = _version_and_data(
                        self._snapshot, collection, key
                    )[0]

        writes, self._writes = self._writes, {}
        self._store.apply(expected, writes)

    def rollback(self) -> None:
        self._writes = {}


def _version_and_data(records: dict, collection: str, key: str) -> tuple[int, dict | None]:
    record = records.get(collection, {}).get(key)
    if record is None:
        return 0, None
    return record["version"], record["data"]


def _collection_view(records: dict, collection: str) -> dict[str, tuple[int, dict]]:
    return {
        key: (record["version"], record["data"])
        for key, record in records.get(collection, {}).items()
    }
