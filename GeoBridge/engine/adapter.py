"""
geomeTRIC engine adapter.

geomeTRIC only accepts custom engines that are instances of
``geometric.engine.Engine``. ``EngineMixin`` carries the driver-facing
behaviour; ``get_engine_cls`` combines it with the real ``Engine`` class at
run time so that everything else (``calc``, stored calculations, the
molecule copy, ...) comes from geomeTRIC's own base implementation.
"""

import logging
import numpy as np

from ..drivers.base import SharedDriverHandle
from ..errors import CoordinateShapeError, MarshalingError, MissingDriverError

logger = logging.getLogger(__name__)

class EngineMixin:
    """Mixin class to be inherited together with ``geometric.engine.Engine``."""

    def __init__(self, molecule, *args, **kwargs):
        self._driver_handle = None
        # The molecule is only consumed by the Engine base initializer.
        super().__init__(molecule, *args, **kwargs)

    @property
    def driver_handle(self):
        return self._driver_handle

    def set_driver(self, driver):
        """
        Set the driver used to calculate energy and gradient.

        ``driver`` is a ``SharedDriverHandle`` or anything that can be wrapped
        in one. Must be called before the first ``calc_new``; calling it again
        rebinds the engine.
        """
        self._driver_handle = SharedDriverHandle.wrap(driver)
        return self

    def calc_new(self, coords, dirname):
        """
        Override of ``Engine.calc_new``.

        Returns ``{"energy": float, "gradient": ndarray}``, where the gradient
        is a flat (natom * 3,) numpy array. geomeTRIC mishandles a list or a
        (natom, 3) array here.
        """
        coords = np.asarray(coords, dtype=float).reshape(-1)
        if coords.size == 0 or coords.size % 3 != 0:
            raise CoordinateShapeError(f"Expected natom * 3 coordinates, got {coords.size}")
        if self._driver_handle is None:
            raise MissingDriverError(f"{type(self).__name__} has no driver; call set_driver() before optimizing")

        result = self._driver_handle.call_with(coords, dirname)

        gradient = np.array(result.gradient, dtype=float)
        if gradient.shape != coords.shape:
            raise MarshalingError(
                f"Driver returned {gradient.size} gradient components for {coords.size} coordinates"
            )
        return {"energy": float(result.energy), "gradient": gradient}

_engine_classes = {}

def get_engine_cls(base=None, name="GeoBridgeEngine"):
    """
    Get the geomeTRIC engine class.

    Equivalent to ``type(name, (EngineMixin, Engine), {})`` with ``Engine``
    defaulting to ``geometric.engine.Engine``. Classes are cached, so
    repeated calls return the same type.
    """
    if base is None:
        from geometric.engine import Engine as base

    key = (base, name)
    cls = _engine_classes.get(key)
    if cls is None:
        cls = type(name, (EngineMixin, base), {})
        _engine_classes[key] = cls
        logger.debug("Composed engine class %s(EngineMixin, %s)", name, base.__name__)
    return cls

def make_engine(molecule, driver=None, base=None):
    """Instantiate the engine class for ``molecule`` and attach ``driver``."""
    engine = get_engine_cls(base)(molecule)
    if driver is not None:
        engine.set_driver(driver)
    return engine
