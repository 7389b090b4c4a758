from .base import GeomDriver, FunctionDriver, SharedDriverHandle, as_driver
from .model import BlankDriver, HarmonicModel, ModelDriver

__all__ = [
    "GeomDriver", "FunctionDriver", "SharedDriverHandle", "as_driver",
    "BlankDriver", "HarmonicModel", "ModelDriver"
]
