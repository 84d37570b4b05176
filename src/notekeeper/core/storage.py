"""
JSON-file record stores.

A record store is one file holding a JSON array of objects. Every mutation
rewrites the whole file, so read-modify-write cycles on the same store are
serialized with a per-store lock and the file is replaced atomically.
"""

import asyncio
import copy
import json
import os
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, AsyncIterator, Dict, List, Optional, Union

from .exceptions import StorageError
from .logging import get_logger

logger = get_logger("storage")

Record = Dict[str, Any]


@dataclass
class StoreResult:
    """Outcome of a store read or write."""

    records: List[Record] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RecordStore:
    """Load and save an ordered list of records in one JSON file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    @property
    def name(self) -> str:
        return self.path.name

    def _read_sync(self) -> StoreResult:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return StoreResult()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading store {self.path}: {e}")
            return StoreResult(error=f"read failed: {e}")

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing store {self.path}: {e}")
            return StoreResult(error=f"invalid JSON: {e}")

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.error(f"Store {self.path} is not a JSON array of objects")
            return StoreResult(error="not a JSON array of objects")

        return StoreResult(records=data)

    def _write_sync(self, records: List[Record]) -> StoreResult:
        tmp = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = NamedTemporaryFile(
                "w", encoding="utf-8", dir=str(self.path.parent), suffix=".tmp", delete=False
            )
            json.dump(records, tmp, indent=2, ensure_ascii=False)
            tmp.flush()
            os.fsync(tmp.fileno())
            tmp.close()
            os.replace(tmp.name, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing store {self.path}: {e}")
            return StoreResult(records=records, error=f"write failed: {e}")
        finally:
            if tmp is not None:
                tmp.close()
                if os.path.exists(tmp.name):
                    os.unlink(tmp.name)

        return StoreResult(records=records)

    async def read(self) -> StoreResult:
        """Read the store. Never raises; failures come back as ``error``."""
        return await asyncio.to_thread(self._read_sync)

    async def write(self, records: List[Record]) -> StoreResult:
        """Replace the store contents. Never raises; failures come back as ``error``."""
        return await asyncio.to_thread(self._write_sync, records)

    async def load(self) -> List[Record]:
        """Records for read-only use; an unreadable store reads as empty."""
        result = await self.read()
        return result.records

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[List[Record]]:
        """Serialized read-modify-write cycle.

        Yields the current records; the list is written back when the block
        exits without an exception and the records actually changed.
        """
        async with self._lock:
            result = await self.read()
            if not result.ok:
                raise StorageError(
                    f"Store '{self.name}' could not be read", details={"reason": result.error}
                )

            records = result.records
            snapshot = copy.deepcopy(records)
            yield records

            if records == snapshot:
                return

            saved = await self.write(records)
            if not saved.ok:
                raise StorageError(
                    f"Store '{self.name}' could not be saved", details={"reason": saved.error}
                )


_stores: Dict[Path, RecordStore] = {}


def get_record_store(path: Union[str, Path]) -> RecordStore:
    """Shared store instance for a path, so all requests use the same lock."""
    key = Path(path).resolve()
    store = _stores.get(key)
    if store is None:
        store = _stores[key] = RecordStore(key)
    return store


def clear_record_stores() -> None:
    """Forget all shared store instances."""
    _stores.clear()
