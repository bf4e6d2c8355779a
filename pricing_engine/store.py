"""
Configuration stores.

The engine never reads or writes configuration itself. The surrounding
application loads a whole ``BepConfig`` (and the staff roster) from a store
before each calculation and saves the whole config back after an edit.
"""
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from dataclasses import asdict
from typing import Iterable, List, Optional

from .models import BepConfig, Employee, default_config

logger = logging.getLogger(__name__)


class ConfigurationStoreError(Exception):
    """The store could not be read or written"""


class ConfigurationStore(ABC):
    @abstractmethod
    def load(self) -> BepConfig:
        ...

    @abstractmethod
    def save(self, cfg: BepConfig) -> None:
        ...

    @abstractmethod
    def load_employees(self) -> List[Employee]:
        ...

    @abstractmethod
    def save_employees(self, employees: Iterable[Employee]) -> None:
        ...


class InMemoryStore(ConfigurationStore):
    def __init__(self, cfg: Optional[BepConfig] = None, employees: Iterable[Employee] = ()):
        self._cfg = cfg if cfg is not None else default_config()
        self._employees = list(employees)

    def load(self) -> BepConfig:
        return self._cfg

    def save(self, cfg: BepConfig) -> None:
        self._cfg = cfg

    def load_employees(self) -> List[Employee]:
        return list(self._employees)

    def save_employees(self, employees: Iterable[Employee]) -> None:
        self._employees = list(employees)


class JsonFileStore(ConfigurationStore):
    """
    One JSON document holding the config and the staff roster:

        {"bep_config": {...}, "employees": [...]}

    A missing file reads as the default config with an empty roster.
    Writes replace the file atomically.
    """

    def __init__(self, path):
        self.path = os.fspath(path)

    def _read(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                doc = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Cannot read configuration from %s: %s", self.path, e)
            raise ConfigurationStoreError(f"Cannot read configuration from {self.path}") from e
        if not isinstance(doc, dict):
            raise ConfigurationStoreError(f"{self.path} does not hold a JSON object")
        return doc

    def _write(self, doc: dict) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(doc, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                os.unlink(tmp_path)
                raise
        except OSError as e:
            logger.error("Cannot write configuration to %s: %s", self.path, e)
            raise ConfigurationStoreError(f"Cannot write configuration to {self.path}") from e

    def load(self) -> BepConfig:
        doc = self._read()
        raw = doc.get("bep_config")
        if raw is None:
            logger.info("No configuration in %s, using defaults", self.path)
            return default_config()
        try:
            cfg = BepConfig.from_dict(raw)
        except (TypeError, ValueError) as e:
            raise ConfigurationStoreError(f"Malformed configuration in {self.path}: {e}") from e
        logger.info("Loaded configuration from %s", self.path)
        return cfg

    def save(self, cfg: BepConfig) -> None:
        doc = self._read()
        doc["bep_config"] = cfg.to_dict()
        self._write(doc)
        logger.info("Saved configuration to %s", self.path)

    def load_employees(self) -> List[Employee]:
        raw = self._read().get("employees", [])
        try:
            return [Employee.from_dict(e) for e in raw]
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigurationStoreError(f"Malformed staff roster in {self.path}: {e}") from e

    def save_employees(self, employees: Iterable[Employee]) -> None:
        doc = self._read()
        doc["employees"] = [asdict(e) for e in employees]
        self._write(doc)
        logger.info("Saved %d employees to %s", len(doc["employees"]), self.path)
