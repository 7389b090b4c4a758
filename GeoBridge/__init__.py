"""
GeoBridge: custom energy/gradient drivers for geomeTRIC

Lets any code that computes an energy and a gradient act as a geomeTRIC
custom engine: implement a driver, wrap it in a shared handle, attach it to
an engine and hand the engine to ``run_optimization``.
"""

__version__ = "0.1.0"
__author__ = "GeoBridge Development Team"

from .models.datatypes import GradientResult, Geometry, CalcSpec, OptimizerParams
from .errors import (
    GeoBridgeError, ConfigParseError, ConfigTypeError,
    MissingDriverError, CoordinateShapeError, MarshalingError
)

from .drivers.base import GeomDriver, FunctionDriver, SharedDriverHandle
from .engine.adapter import EngineMixin, get_engine_cls, make_engine
from .config import parse_config_text, convert_value, convert_root, params_from_text, load_params
from .io.molecule import init_molecule, molecule_from_geometry
from .orchestrators.optimize import run_optimization, final_coords, final_energy

__all__ = [
    "GradientResult", "Geometry", "CalcSpec", "OptimizerParams",
    "GeoBridgeError", "ConfigParseError", "ConfigTypeError",
    "MissingDriverError", "CoordinateShapeError", "MarshalingError",
    "GeomDriver", "FunctionDriver", "SharedDriverHandle",
    "EngineMixin", "get_engine_cls", "make_engine",
    "parse_config_text", "convert_value", "convert_root", "params_from_text", "load_params",
    "init_molecule", "molecule_from_geometry",
    "run_optimization", "final_coords", "final_energy"
]
