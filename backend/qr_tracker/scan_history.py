import json
import logging
import os
import threading
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from qr_tracker import app_config

logger = logging.getLogger("qr_tracker.history")


class ScanRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    campaign: str
    timestamp: str
    ip: str
    user_agent: Optional[str] = Field(default=None, alias="userAgent")

    @classmethod
    def now(cls, campaign: str, ip: str, user_agent: Optional[str] = None):
        return cls(
            campaign=campaign,
            timestamp=datetime.now(timezone.utc).isoformat(),
            ip=ip,
            user_agent=user_agent,
        )

    def to_json(self):
        return self.model_dump(by_alias=True)


class ScanStore:
    """Append-only scan log held in memory and mirrored to a JSON file.

    The whole file is rewritten on every append. A lock serialises appends so
    concurrent scans cannot drop each other's records.
    """

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()
        self._records = self._load()

    def _load(self) -> List[ScanRecord]:
        if not os.path.exists(self.path):
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info("Loaded %d scan records from %s", len(data), self.path)
        return [ScanRecord.model_validate(item) for item in data]

    def _save(self, records: List[ScanRecord]):
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([r.to_json() for r in records], f, indent=2)

    def append(self, record: ScanRecord) -> ScanRecord:
        with self._lock:
            # memory only changes once the file write went through
            records = self._records + [record]
            self._save(records)
            self._records = records
        return record

    def list_records(self) -> List[ScanRecord]:
        with self._lock:
            return list(self._records)

    def list_recent(self) -> List[ScanRecord]:
        """Records most recent first."""
        return self.list_records()[::-1]

    def __len__(self):
        with self._lock:
            return len(self._records)


_store = None


def get_store() -> ScanStore:
    global _store
    if _store is None:
        _store = ScanStore(app_config.SCAN_LOG_FILE)
    return _store
