"""RuleStore — JSON-file persistence for the RuleSet.

INVARIANT: Each accepted rule is committed as one atomic read-modify-write.
:meth:`RuleStore.transaction` holds the store lock from load to save, so a
validation never observes a snapshot that a concurrent add has outdated.
The lock is a sidecar ``.<name>.lock`` file, so separate ``redirectctl``
processes serialize too; a per-path thread lock covers threads sharing it.

File format::

    {"redirectionRules": [{"src": "...", "dest": "...", "regex": false}]}
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from filelock import FileLock, Timeout
from pydantic import ValidationError

from redirectctl.domain.rules import Rule

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

DEFAULT_KEY = "redirectionRules"
LOCK_TIMEOUT = 10.0

# One thread lock per resolved store path, shared by every RuleStore in the process.
_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class StoreError(Exception):
    """The rule file exists but cannot be read as a RuleSet."""


@dataclass
class StoreTransaction:
    """Mutable working copy of the RuleSet inside :meth:`RuleStore.transaction`.

    Changes are written back only when the ``with`` block exits cleanly and
    :attr:`dirty` is set.
    """

    rules: list[Rule] = field(default_factory=list)
    dirty: bool = False

    def append(self, rule: Rule) -> int:
        """Append *rule* and return its position."""
        self.rules.append(rule)
        self.dirty = True
        return len(self.rules) - 1

    def pop(self, index: int) -> Rule:
        """Remove and return the rule at *index* (IndexError if absent)."""
        removed = self.rules.pop(index)
        self.dirty = True
        return removed

    @property
    def snapshot(self) -> tuple[Rule, ...]:
        """Immutable view handed to the validator."""
        return tuple(self.rules)


class TransactionAborted(Exception):
    """Raised when a transaction could not persist its changes."""


class RuleStore:
    """Load and save the RuleSet from a JSON file.

    Parameters:
        path: Location of the rule file. Parent directories are created on save.
        key: Top-level JSON key holding the rule list.
        lock_timeout: Seconds a transaction waits for another process.
    """

    def __init__(
        self, path: Path, *, key: str = DEFAULT_KEY, lock_timeout: float = LOCK_TIMEOUT
    ) -> None:
        self.path = path
        self.key = key
        self._lock = _lock_for(path.resolve())
        self._file_lock = FileLock(self.lock_path, timeout=lock_timeout)

    @property
    def lock_path(self) -> Path:
        """Sidecar file guarding read-modify-write across processes."""
        return self.path.with_name(f".{self.path.name}.lock")

    def load(self) -> tuple[Rule, ...]:
        """Read the current RuleSet. A missing file is an empty RuleSet."""
        if not self.path.exists():
            return ()
        try:
            data: Any = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON in {self.path}: {exc}"
            raise StoreError(msg) from exc

        if not isinstance(data, dict):
            msg = f"Expected a JSON object in {self.path}"
            raise StoreError(msg)
        raw_rules = data.get(self.key) or []
        if not isinstance(raw_rules, list):
            msg = f"Expected a list under {self.key!r} in {self.path}"
            raise StoreError(msg)

        try:
            return tuple(Rule.model_validate(item) for item in raw_rules)
        except ValidationError as exc:
            msg = f"Malformed rule in {self.path}: {exc.error_count()} error(s)"
            raise StoreError(msg) from exc

    def save(self, rules: tuple[Rule, ...] | list[Rule]) -> bool:
        """Persist *rules* atomically. Returns False if the write failed."""
        payload = {self.key: [rule.to_storage() for rule in rules]}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(payload, fh, indent=2)
                    fh.write("\n")
                os.replace(tmp_name, self.path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError:
            logger.warning("Failed to save rules to %s", self.path, exc_info=True)
            return False
        logger.debug("Saved %d rule(s) to %s", len(rules), self.path)
        return True

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """Serialized load → modify → save.

        Raises :class:`TransactionAborted` if the lock cannot be taken or the
        final save fails. Exceptions inside the block discard the working copy.
        """
        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self._file_lock.acquire()
            except (OSError, Timeout) as exc:
                msg = f"Could not lock {self.path}: {exc}"
                raise TransactionAborted(msg) from exc
            try:
                txn = StoreTransaction(rules=list(self.load()))
                yield txn
                if txn.dirty and not self.save(txn.rules):
                    msg = f"Could not write {self.path}"
                    raise TransactionAborted(msg)
            finally:
                self._file_lock.release()
