"""
Run geomeTRIC with a GeoBridge engine.
"""

import copy
import logging
import os
import tempfile
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

import numpy as np

logger = logging.getLogger(__name__)

# Checkpoint cadence passed to run_optimizer as ``check``.
CHECK_EVERY = 1

@contextmanager
def input_path(explicit: Optional[str] = None) -> Iterator[str]:
    """
    Yield the ``input`` path handed to geomeTRIC.

    An explicit path is used as is and left alone. Otherwise an empty file is
    created inside a fresh temporary directory; geomeTRIC derives its log and
    trajectory file names from this path, so the whole directory is removed
    on exit, whether the optimization succeeded or raised.
    """
    if explicit is not None:
        yield os.fspath(explicit)
        return

    with tempfile.TemporaryDirectory(prefix="geobridge_") as tmpdir:
        path = os.path.join(tmpdir, "geobridge.in")
        open(path, "w").close()
        yield path

def merge_params(params: Optional[Mapping[str, Any]], engine, input: str) -> Dict[str, Any]:
    """
    Build the keyword arguments for ``run_optimizer``.

    ``params`` is deep-copied, so neither this call nor geomeTRIC can modify
    the caller's object. ``customengine``, ``check`` and ``input`` always
    override values of the same name.
    """
    kwargs = copy.deepcopy(dict(params)) if params is not None else {}
    kwargs["customengine"] = engine
    kwargs["check"] = CHECK_EVERY
    kwargs["input"] = input
    return kwargs

def run_optimization(engine, params: Optional[Mapping[str, Any]] = None,
                     input: Optional[str] = None,
                     run_optimizer: Optional[Callable[..., Any]] = None):
    """
    Run one geomeTRIC optimization.

    Args:
        engine: Engine instance with a driver attached (see ``make_engine``).
        params: Optimizer parameters (e.g. from ``params_from_text``).
        input: Path geomeTRIC logs against. If None, a temporary path is used
            and removed afterwards, so the log cannot be retrieved.
        run_optimizer: Entry point to call; defaults to
            ``geometric.optimize.run_optimizer``.

    Returns:
        The object returned by ``run_optimizer``, untouched. For geomeTRIC
        this is a Molecule whose ``xyzs`` (Å) and ``qm_energies`` (Eh) hold
        the trajectory, last entry being the optimized structure.
    """
    if run_optimizer is None:
        from geometric.optimize import run_optimizer

    with input_path(input) as path:
        kwargs = merge_params(params, engine, path)
        logger.info("Starting geomeTRIC optimization (input=%s, %d parameters)", path, len(params or {}))
        result = run_optimizer(**kwargs)
    logger.info("geomeTRIC optimization finished")
    return result

def final_coords(result) -> List[float]:
    """Flattened last structure of the trajectory (Å), i.e. ``result.xyzs[-1]``."""
    return np.asarray(result.xyzs[-1], dtype=float).reshape(-1).tolist()

def final_energy(result) -> float:
    """Last energy of the trajectory (Eh), i.e. ``result.qm_energies[-1]``."""
    return float(result.qm_energies[-1])
