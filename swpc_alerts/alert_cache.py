"""JSON-file backed cache of alert fingerprints that were already notified.

The cache file holds a JSON object mapping fingerprint -> true. Entries are
never expired, so a condition is only ever notified once per cache file.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from .config import ALERT_CACHE_PATH
from .models import CacheLoadStatus

logger = logging.getLogger(__name__)

CACHE_FILE_MODE = 0o644


class AlertCache:
    """Set of previously-notified alert fingerprints."""

    def __init__(
        self,
        path: str | Path | None = None,
        fingerprints: set[str] | None = None,
        load_status: CacheLoadStatus = CacheLoadStatus.MISSING,
    ):
        self.path = Path(path or ALERT_CACHE_PATH)
        self._fingerprints: set[str] = set(fingerprints or ())
        self.load_status = load_status

    @classmethod
    def load(cls, path: str | Path | None = None) -> "AlertCache":
        """Load the cache from disk.

        A missing file is a first run. An unreadable or malformed file is
        logged and replaced by an empty cache; neither case raises.
        """
        cache_path = Path(path or ALERT_CACHE_PATH)
        if not cache_path.exists():
            logger.info(f"No alert cache at {cache_path}, starting empty")
            return cls(cache_path, load_status=CacheLoadStatus.MISSING)

        try:
            data = json.loads(cache_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Alert cache {cache_path} unreadable, starting empty: {e}")
            return cls(cache_path, load_status=CacheLoadStatus.CORRUPT)

        if not isinstance(data, dict) or not all(
            isinstance(v, bool) for v in data.values()
        ):
            logger.warning(f"Alert cache {cache_path} malformed, starting empty")
            return cls(cache_path, load_status=CacheLoadStatus.CORRUPT)

        seen = {fp for fp, flag in data.items() if flag}
        logger.info(f"Loaded {len(seen)} alert fingerprint(s) from {cache_path}")
        return cls(cache_path, fingerprints=seen, load_status=CacheLoadStatus.LOADED)

    def contains(self, fp: str) -> bool:
        return fp in self._fingerprints

    def record(self, fp: str) -> None:
        self._fingerprints.add(fp)

    def save(self) -> bool:
        """Write the cache to disk, replacing the previous file.

        Returns:
            True on success. Failures are logged and reported as False.
        """
        payload = json.dumps(
            {fp: True for fp in self._fingerprints}, sort_keys=True
        )
        directory = self.path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.chmod(tmp_name, CACHE_FILE_MODE)
                os.replace(tmp_name, self.path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error(f"Failed to save alert cache to {self.path}: {e}")
            return False

        logger.debug(f"Saved {len(self._fingerprints)} fingerprint(s) to {self.path}")
        return True

    def __contains__(self, fp: str) -> bool:
        return self.contains(fp)

    def __len__(self) -> int:
        return len(self._fingerprints)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AlertCache):
            return NotImplemented
        return self._fingerprints == other._fingerprints
