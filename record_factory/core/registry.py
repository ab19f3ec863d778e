from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Mapping

from .errors import InvalidOptionsError, NotARecordError
from .fields import is_record_type
from .validator import check_params

log = logging.getLogger("record_factory.registry")


class TypeRegistry:
    """Registered default parameters, keyed by record class.

    A later registration for the same class replaces the earlier mapping
    entirely. Entries live until unregister()/clear() is called explicitly.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._defaults: Dict[type, Dict[str, Any]] = {}

    def register(self, sample: Any, defaults: Mapping[str, Any], *, bare_callables: bool = True) -> None:
        record_type = sample if isinstance(sample, type) else type(sample)
        if not is_record_type(record_type):
            raise NotARecordError(target=sample)
        if not isinstance(defaults, Mapping):
            raise InvalidOptionsError(options=defaults)

        check_params(record_type, defaults, bare_callables=bare_callables)

        with self._lock:
            replaced = record_type in self._defaults
            self._defaults[record_type] = dict(defaults)

        log.info(
            "registry.register type=%s fields=%s replaced=%s",
            record_type.__qualname__,
            sorted(defaults),
            replaced,
        )

    def defaults_for(self, record_type: type) -> Dict[str, Any]:
        with self._lock:
            return dict(self._defaults.get(record_type, {}))

    def unregister(self, record_type: type) -> bool:
        with self._lock:
            return self._defaults.pop(record_type, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._defaults.clear()

    def registered_types(self) -> List[type]:
        with self._lock:
            return sorted(self._defaults, key=lambda t: (t.__module__, t.__qualname__))

    def __contains__(self, record_type: object) -> bool:
        with self._lock:
            return record_type in self._defaults

    def __len__(self) -> int:
        with self._lock:
            return len(self._defaults)
