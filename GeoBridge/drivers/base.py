"""
Driver interface and the thread-safe handle that geomeTRIC engines call into.

A driver is whatever code can turn a coordinate vector into an energy and a
gradient: an SCF/MP2/CC gradient program, a force field, an ASE calculator.
It is wrapped in a ``SharedDriverHandle`` before being attached to an engine,
so that every call into it is serialized.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

import numpy as np

from ..errors import MissingDriverError
from ..models.datatypes import GradientResult

logger = logging.getLogger(__name__)

class GeomDriver(ABC):
    """Interface to be implemented by energy/gradient codes.

    Corresponds to the ``calc_new`` method of ``geometric.engine.Engine``.
    Implementations are free to keep state between calls (last geometry,
    last energy, SCF guesses, ...); callers may read it back after the
    optimization finished.
    """

    @abstractmethod
    def calc_new(self, coords: np.ndarray, dirname: str) -> GradientResult:
        """
        Calculate the energy and gradient of the system.

        Args:
            coords: Flattened (natom * 3) coordinates in Bohr, with the three
                Cartesian components of each atom contiguous.
            dirname: Directory to run the calculation in. May be ignored if
                the computation does not need scratch space.

        Returns:
            GradientResult with energy (Hartree) and flattened gradient
            (Hartree/Bohr).
        """

class FunctionDriver(GeomDriver):
    """Adapt a plain function ``f(coords, dirname)`` to the driver interface.

    The function may return a ``GradientResult`` or an ``(energy, gradient)``
    pair.
    """

    def __init__(self, func: Callable[[np.ndarray, str], Any]):
        self.func = func

    def calc_new(self, coords, dirname):
        out = self.func(coords, dirname)
        if isinstance(out, GradientResult):
            return out
        energy, gradient = out
        return GradientResult(energy=energy, gradient=gradient)

def as_driver(obj) -> GeomDriver:
    """Return ``obj`` as a driver; duck-typed objects and plain callables are wrapped."""
    if isinstance(obj, GeomDriver):
        return obj
    if hasattr(obj, "calc_new"):
        return FunctionDriver(obj.calc_new)
    if callable(obj):
        return FunctionDriver(obj)
    raise TypeError(f"{type(obj).__name__} is not a driver: expected calc_new(coords, dirname) or a callable")

class SharedDriverHandle:
    """
    Exclusive, serialized access to one driver.

    The handle is shared between the caller and any number of engines. Each
    ``call_with`` holds the lock only for the duration of one ``calc_new``.
    ``attach`` takes the same lock, so rebinding while a gradient call is in
    flight waits for that call to finish.
    """

    def __init__(self, driver: Optional[GeomDriver] = None):
        self._lock = threading.Lock()
        self._driver = None if driver is None else as_driver(driver)
        self.ncalls = 0

    @classmethod
    def wrap(cls, obj) -> "SharedDriverHandle":
        """Return ``obj`` if it already is a handle, else a new handle around it."""
        if isinstance(obj, cls):
            return obj
        return cls(obj)

    @property
    def driver(self) -> Optional[GeomDriver]:
        return self._driver

    def attach(self, driver: GeomDriver) -> None:
        """Replace the contained driver. Last attach wins."""
        driver = as_driver(driver)
        with self._lock:
            if self._driver is not None:
                logger.debug("Rebinding driver %r -> %r", self._driver, driver)
            self._driver = driver

    def call_with(self, coords, dirname: str) -> GradientResult:
        """Run ``calc_new`` on the contained driver under the lock."""
        coords = np.array(coords, dtype=float).reshape(-1)
        with self._lock:
            if self._driver is None:
                raise MissingDriverError("No driver attached; call attach() or set_driver() first")
            self.ncalls += 1
            logger.debug("Gradient call %d (%d coordinates, dirname=%r)", self.ncalls, coords.size, dirname)
            return self._driver.calc_new(coords, dirname)

    def __repr__(self):
        return f"SharedDriverHandle(driver={self._driver!r}, ncalls={self.ncalls})"
