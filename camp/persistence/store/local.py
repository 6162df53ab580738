"""Device-local key/value store.

Each collection is one JSON array under one key. There is no transaction
primitive, so every read-modify-write on a key runs under that key's
``asyncio.Lock``; two near-simultaneous writes to the same trip can't lose
each other. The collection is written back only once the in-memory
mutation has fully succeeded.
"""

import asyncio
import json
import os
from abc import abstractmethod
from pathlib import Path
from typing import Any, Optional
from urllib.parse import quote
from uuid import uuid4

import logfire

from camp.domain.error import NotFoundError, ValidationError
from camp.domain.repository import LocalStore
from camp.util.locks import KeyedLocks


class KeyValueLocalStore(LocalStore):
    """LocalStore over a whole-value key/value backend."""

    def __init__(self) -> None:
        self._locks: KeyedLocks[str] = KeyedLocks()

    @abstractmethod
    async def _load(self, address: str) -> Optional[str]:
        """Raw JSON stored under a key, None if absent."""
        pass

    @abstractmethod
    async def _save(self, address: str, payload: str) -> None:
        """Replace the raw JSON stored under a key."""
        pass

    async def _read(self, address: str) -> list[Any]:
        # Raw entries: ones this version cannot read are kept on write-back
        payload = await self._load(address)
        if not payload:
            return []
        try:
            records = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Local collection {address} is not valid JSON") from e
        if not isinstance(records, list):
            raise ValidationError(f"Local collection {address} is not a JSON array")
        return records

    async def _write(self, address: str, records: list[Any]) -> None:
        await self._save(address, json.dumps(records))

    async def get(self, address: str) -> list[dict[str, Any]]:
        async with self._locks.hold(address):
            records = await self._read(address)
        unreadable = sum(1 for r in records if not isinstance(r, dict))
        if unreadable:
            logfire.warn(
                "Skipped unreadable local entries", address=address, count=unreadable
            )
        return [r for r in records if isinstance(r, dict)]

    async def add(self, address: str, record: dict[str, Any]) -> str:
        async with self._locks.hold(address):
            records = await self._read(address)
            record_id = str(record.get("id") or uuid4().hex)
            records.append({**record, "id": record_id})
            await self._write(address, records)
        logfire.debug("Local record added", address=address, record_id=record_id)
        return record_id

    async def update(self, address: str, record_id: str, patch: dict[str, Any]) -> None:
        async with self._locks.hold(address):
            records = await self._read(address)
            for index, record in enumerate(records):
                if isinstance(record, dict) and record.get("id") == record_id:
                    records[index] = {**record, **patch, "id": record_id}
                    break
            else:
                raise NotFoundError("record", record_id)
            await self._write(address, records)

    async def remove(self, address: str, record_id: str) -> None:
        async with self._locks.hold(address):
            records = await self._read(address)
            remaining = [
                r for r in records if not (isinstance(r, dict) and r.get("id") == record_id)
            ]
            if len(remaining) != len(records):
                await self._write(address, remaining)


class JsonFileLocalStore(KeyValueLocalStore):
    """One JSON file per key inside a directory.

    File I/O runs in a worker thread. Writes go to a temporary file that
    replaces the target, so a crash never leaves half a collection behind.
    """

    def __init__(self, directory: str | Path) -> None:
        """Initialize store.

        Args:
            directory: Folder holding one file per collection
        """
        super().__init__()
        self.directory = Path(directory)

    def _path(self, address: str) -> Path:
        return self.directory / f"{quote(address, safe='')}.json"

    async def _load(self, address: str) -> Optional[str]:
        path = self._path(address)

        def read() -> Optional[str]:
            if not path.exists():
                return None
            return path.read_text(encoding="utf-8")

        return await asyncio.to_thread(read)

    async def _save(self, address: str, payload: str) -> None:
        path = self._path(address)

        def write() -> None:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(".json.tmp")
            tmp.write_text(payload, encoding="utf-8")
            os.replace(tmp, path)

        await asyncio.to_thread(write)
