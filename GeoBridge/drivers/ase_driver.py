"""
Driver backed by an ASE calculator.
"""

import numpy as np
from typing import List, Optional

from ase import Atoms

from .base import GeomDriver
from ..models.datatypes import CalcSpec, Geometry, GradientResult
from ..io.ase_helpers import make_calculator
from ..utils.units import bohr_to_ang, eV_to_hartree, forces_to_gradient

class AseDriver(GeomDriver):
    """
    Evaluate energies and gradients with any ASE calculator.

    geomeTRIC passes Bohr and expects Hartree and Hartree/Bohr; ASE works in
    Å and eV, so units are converted on the way in and out.
    """

    def __init__(self, symbols: List[str], calc_spec: Optional[CalcSpec] = None, calculator=None):
        if calculator is None:
            calculator = make_calculator(calc_spec or CalcSpec())
        self.atoms = Atoms(symbols=list(symbols), positions=np.zeros((len(symbols), 3)))
        self.atoms.calc = calculator
        self.current_coords: Optional[np.ndarray] = None
        self.current_energy: Optional[float] = None

    @classmethod
    def from_geometry(cls, geometry: Geometry, calc_spec: Optional[CalcSpec] = None, calculator=None) -> "AseDriver":
        return cls(geometry.symbols, calc_spec=calc_spec, calculator=calculator)

    def calc_new(self, coords, dirname):
        positions = bohr_to_ang(coords).reshape(-1, 3)
        if positions.shape[0] != len(self.atoms):
            raise ValueError(f"Driver has {len(self.atoms)} atoms, got coordinates for {positions.shape[0]}")
        self.atoms.set_positions(positions)

        energy = eV_to_hartree(float(self.atoms.get_potential_energy()))
        gradient = forces_to_gradient(self.atoms.get_forces())

        self.current_coords = positions.reshape(-1).copy()
        self.current_energy = energy
        return GradientResult(energy=energy, gradient=gradient)
