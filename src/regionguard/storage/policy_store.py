"""Persisted region to required-group mapping.

Writes are write-through-then-commit: the new document is written to disk
first and the in-memory snapshot is swapped only once the write succeeded,
so memory never holds a rule that is not on disk. Readers always see an
immutable snapshot; writers serialize on a lock.

Usage:
    store = RegionPolicyStore("regions.json")
    store.load()
    store.add("Arena", "vip")
    for rule in store.list():
        print(rule.describe())
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from regionguard.core.errors import (
    ConfigParseError,
    PersistError,
    StoreNotLoadedError,
    ValidationError,
)
from regionguard.core.models import RegionRule
from regionguard.storage.document import dump_document, parse_document

logger = logging.getLogger(__name__)


class RegionPolicyStore:
    """Owns the region rules and their on-disk document.

    Constructed empty and unloaded; ``load()`` must succeed before rules can
    be listed or changed. Enumeration is lexicographic by region name.

    Args:
        path: Location of the region document.
        indent: Indentation used when writing the document.
    """

    def __init__(self, path: str | os.PathLike[str] = "regions.json", indent: int = 2):
        self._path = Path(path)
        self._indent = indent
        self._lock = threading.Lock()
        self._rules: Mapping[str, str] | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_loaded(self) -> bool:
        return self._rules is not None

    def __len__(self) -> int:
        return len(self._snapshot())

    def __contains__(self, region_name: object) -> bool:
        return region_name in self._snapshot()

    def _snapshot(self) -> Mapping[str, str]:
        rules = self._rules
        if rules is None:
            raise StoreNotLoadedError(f"Region rules from {self._path} are not loaded")
        return rules

    def _write(self, rules: Mapping[str, str]) -> None:
        """Atomically replace the document on disk."""
        data = dump_document(rules, self._indent)
        directory = self._path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=directory
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(data)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("Failed to write %s: %s", self._path, e)
            raise PersistError(f"Could not write {self._path}: {e}") from e

    def _commit(self, rules: dict[str, str]) -> None:
        self._write(rules)
        self._rules = MappingProxyType(rules)

    def initialize_if_missing(self) -> bool:
        """Create an empty document if none exists.

        Returns:
            True if a new document was written.
        """
        if self._path.exists():
            return False
        self._write({})
        logger.info("Created empty region document at %s", self._path)
        return True

    def load(self) -> None:
        """Read the document from disk, replacing in-memory rules.

        A missing document is created empty first. On a malformed document
        the previous in-memory state (loaded or not) is kept.

        Raises:
            ConfigParseError: If the document exists but cannot be parsed.
            PersistError: If a missing document cannot be created.
        """
        with self._lock:
            self.initialize_if_missing()
            try:
                text = self._path.read_text(encoding="utf-8-sig")
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Failed to read %s: %s", self._path, e)
                raise ConfigParseError(str(self._path), str(e)) from e
            try:
                rules = parse_document(text)
            except ValueError as e:
                logger.error("Malformed region document %s: %s", self._path, e)
                raise ConfigParseError(str(self._path), str(e)) from e
            self._rules = MappingProxyType(rules)
        logger.info("Loaded %d region rules from %s", len(rules), self._path)

    def reload(self) -> None:
        """Load again from disk, replacing in-memory rules wholesale.

        Rules are swapped only once the new document parsed, so a failed
        reload leaves the last good rules enforced.
        """
        self.load()

    def get(self, region_name: str) -> str | None:
        """Required group for a region, or None if it has no rule."""
        return self._snapshot().get(region_name)

    def list(self) -> list[RegionRule]:
        """Snapshot of all rules ordered by region name.

        Raises:
            StoreNotLoadedError: If no load has succeeded yet.
        """
        rules = self._snapshot()
        return [RegionRule(name, rules[name]) for name in sorted(rules)]

    def add(self, region_name: str, required_group: str) -> RegionRule:
        """Set the required group for a region, replacing any previous rule.

        Raises:
            ValidationError: If either argument is empty.
            StoreNotLoadedError: If no load has succeeded yet.
            PersistError: If the document could not be written. In-memory
                rules are left unchanged.
        """
        if not region_name or not region_name.strip():
            raise ValidationError("Region name must not be empty")
        if not required_group or not required_group.strip():
            raise ValidationError("Required group must not be empty")
        with self._lock:
            rules = dict(self._snapshot())
            rules[region_name] = required_group
            self._commit(rules)
        logger.info("Region %s now requires group %s", region_name, required_group)
        return RegionRule(region_name, required_group)

    def remove(self, region_name: str) -> bool:
        """Drop the rule for a region.

        Returns:
            True if a rule existed and was removed.

        Raises:
            StoreNotLoadedError: If no load has succeeded yet.
            PersistError: If the document could not be written.
        """
        with self._lock:
            rules = dict(self._snapshot())
            if rules.pop(region_name, None) is None:
                return False
            self._commit(rules)
        logger.info("Removed rule for region %s", region_name)
        return True
