from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .errors import (
    AllocationError,
    FactoryError,
    InvalidCountError,
    InvalidOptionsError,
    NotAnInstanceError,
    NotARecordError,
    TooManyOptionsError,
)
from .executor import apply_params
from .fields import is_record_type
from .metrics import FactoryMetrics
from .registry import TypeRegistry
from .settings import FactorySettings
from .validator import check_params

log = logging.getLogger("record_factory.builder")


class Factory:
    """
    Builds record instances from registered defaults plus per-call overrides.

    Every build call takes at most one overrides mapping; overrides win over
    registered defaults key by key. The merged mapping is validated against
    the record class on every call before anything is assigned.

    Field application order is unspecified: defaults must not depend on one
    another.
    """

    def __init__(self, registry: Optional[TypeRegistry] = None, settings: Optional[FactorySettings] = None):
        self.registry = registry if registry is not None else TypeRegistry()
        self.settings = settings if settings is not None else FactorySettings.from_env()
        self.metrics = FactoryMetrics()

    # --- registry ---

    def register(self, sample: Any, defaults: Mapping[str, Any]) -> None:
        self.metrics.increment("register.calls")
        self.registry.register(sample, defaults, bare_callables=self.settings.bare_callables)

    def defaults_for(self, record_type: type) -> Dict[str, Any]:
        return self.registry.defaults_for(record_type)

    def effective_params(self, target: Any, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Registered defaults for the target's class with `overrides` on top. Not validated."""
        record_type = target if isinstance(target, type) else type(target)
        if not is_record_type(record_type):
            raise NotARecordError(target=target)
        options: Tuple[Any, ...] = () if overrides is None else (overrides,)
        return self._merge(record_type, options)

    # --- builds ---

    def build(self, target: Any, *options: Any) -> Any:
        self.metrics.increment("build.calls")
        try:
            record_type, params = self._parse_args(target, options)
            apply_params(target, params, bare_callables=self.settings.bare_callables)
        except FactoryError:
            self.metrics.increment("build.failures")
            raise

        self.metrics.increment("build.instances")
        log.debug("build type=%s fields=%s", record_type.__qualname__, sorted(params))
        return target

    def build_many(self, target: Any, n: int, *options: Any) -> List[Any]:
        """
        Build `n` fresh instances of the target's class; `target` itself is
        left unchanged. Instances come from calling the class with no
        arguments, or are deep copies of `target` when that is not possible.
        Suppliers are invoked separately for every instance.
        """
        self.metrics.increment("build.calls")
        try:
            if isinstance(n, bool) or not isinstance(n, int) or n < 0:
                raise InvalidCountError(count=n)
            record_type, params = self._parse_args(target, options)
            out = [self._allocate(record_type, target) for _ in range(n)]
            for instance in out:
                apply_params(instance, params, bare_callables=self.settings.bare_callables)
        except FactoryError:
            self.metrics.increment("build.failures")
            raise

        self.metrics.increment("build.instances", n)
        log.debug("build_many type=%s n=%s fields=%s", record_type.__qualname__, n, sorted(params))
        return out

    def must_build(self, target: Any, *options: Any) -> Any:
        """
        build() that returns `target` unchanged instead of raising a
        FactoryError. Exceptions raised by suppliers still propagate.
        """
        try:
            return self.build(target, *options)
        except FactoryError as e:
            if self.settings.strict_must:
                raise
            self._swallowed("must_build", e)
            return target

    def must_build_many(self, target: Any, n: int, *options: Any) -> List[Any]:
        try:
            return self.build_many(target, n, *options)
        except FactoryError as e:
            if self.settings.strict_must:
                raise
            self._swallowed("must_build_many", e)
            return []

    # --- internals ---

    def _swallowed(self, op: str, err: FactoryError) -> None:
        self.metrics.increment("must.swallowed")
        log.log(self.settings.must_log_level, "%s ignored error=%s: %s", op, type(err).__name__, err)

    def _allocate(self, record_type: type, prototype: Any) -> Any:
        try:
            return record_type()
        except Exception as e:
            # required constructor arguments; fall back to copying the prototype
            log.debug("allocate type=%s constructor failed: %s", record_type.__qualname__, e)
        try:
            return copy.deepcopy(prototype)
        except Exception as e:
            raise AllocationError(record_type=record_type, reason=str(e)) from e

    def _record_type(self, target: Any) -> type:
        if isinstance(target, type):
            raise NotAnInstanceError(target=target)
        record_type = type(target)
        if not is_record_type(record_type):
            raise NotARecordError(target=target)
        return record_type

    def _merge(self, record_type: type, options: Tuple[Any, ...]) -> Dict[str, Any]:
        if len(options) > 1:
            raise TooManyOptionsError(count=len(options))

        # defaults_for returns a copy; the registry never sees overrides
        params = self.registry.defaults_for(record_type)
        if options:
            overrides = options[0]
            if not isinstance(overrides, Mapping) or not all(isinstance(k, str) for k in overrides):
                raise InvalidOptionsError(options=overrides)
            params.update(overrides)
        return params

    def _parse_args(self, target: Any, options: Tuple[Any, ...]) -> Tuple[type, Dict[str, Any]]:
        record_type = self._record_type(target)
        params = self._merge(record_type, options)
        check_params(record_type, params, bare_callables=self.settings.bare_callables)
        return record_type, params


_DEFAULT_FACTORY: Optional[Factory] = None
_DEFAULT_FACTORY_LOCK = threading.Lock()


def default_factory() -> Factory:
    global _DEFAULT_FACTORY
    with _DEFAULT_FACTORY_LOCK:
        if _DEFAULT_FACTORY is None:
            _DEFAULT_FACTORY = Factory()
        return _DEFAULT_FACTORY


def reset_default_factory(factory: Optional[Factory] = None) -> Factory:
    """Replace the process-wide factory (a new empty one unless given)."""
    global _DEFAULT_FACTORY
    with _DEFAULT_FACTORY_LOCK:
        _DEFAULT_FACTORY = factory if factory is not None else Factory()
        return _DEFAULT_FACTORY


def register(sample: Any, defaults: Mapping[str, Any]) -> None:
    default_factory().register(sample, defaults)


def defaults_for(record_type: type) -> Dict[str, Any]:
    return default_factory().defaults_for(record_type)


def build(target: Any, *options: Any) -> Any:
    return default_factory().build(target, *options)


def build_many(target: Any, n: int, *options: Any) -> List[Any]:
    return default_factory().build_many(target, n, *options)


def must_build(target: Any, *options: Any) -> Any:
    return default_factory().must_build(target, *options)


def must_build_many(target: Any, n: int, *options: Any) -> List[Any]:
    return default_factory().must_build_many(target, n, *options)
