"""
Pydantic data models for GeoBridge package.
"""

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Tuple, Optional, Dict, Any

class GradientResult(BaseModel):
    """Energy and gradient returned by a driver for one geometry.

    - ``energy``: scalar energy (Hartree).
    - ``gradient``: flattened (natom * 3) gradient (Hartree/Bohr), with the
      three Cartesian components of each atom contiguous.
    """
    energy: float
    gradient: List[float]

    @field_validator("gradient", mode="before")
    @classmethod
    def _flatten(cls, value):
        # numpy arrays and (natom, 3) nests are stored flat
        return np.asarray(value, dtype=float).reshape(-1).tolist()

    @property
    def natoms(self) -> int:
        return len(self.gradient) // 3

class Geometry(BaseModel):
    """Molecular geometry representation."""
    symbols: List[str]
    coords: List[Tuple[float, float, float]]  # Å
    comment: str = ""

class CalcSpec(BaseModel):
    """ASE calculator specification used by the ASE-backed driver."""
    ase_calculator: str = "emt"     # "emt", "lj", "morse", "tblite"
    calc_kwargs: Dict[str, Any] = Field(default_factory=dict)
    charge: int = 0
    spin_multiplicity: int = 1

class OptimizerParams(BaseModel):
    """Recognized geomeTRIC run parameters.

    Only used to type-check known keys; unknown keys are allowed and passed
    to geomeTRIC verbatim.
    """
    model_config = ConfigDict(extra="allow", strict=True)

    transition: Optional[bool] = None        # search for a transition state
    maxiter: Optional[int] = None
    coordsys: Optional[str] = None           # "tric", "cart", "dlc", ...
    convergence_set: Optional[str] = None    # "GAU", "NWCHEM_LOOSE", ...
    convergence_energy: Optional[float] = None  # Eh
    convergence_grms: Optional[float] = None    # Eh/Bohr
    convergence_gmax: Optional[float] = None    # Eh/Bohr
    convergence_drms: Optional[float] = None    # Å
    convergence_dmax: Optional[float] = None    # Å
    trust: Optional[float] = None
    tmax: Optional[float] = None
    prefix: Optional[str] = None
