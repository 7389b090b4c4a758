"""
Reference drivers.

``HarmonicModel`` is the pairwise harmonic toy model from geomeTRIC's own
custom-engine test; with the default parameters its transition state lies
at E = 0.32.
"""

import numpy as np
from typing import Optional

from .base import GeomDriver
from ..models.datatypes import GradientResult

DEFAULT_B = ((0.0, 1.8, 1.8), (1.8, 0.0, 2.8), (1.8, 2.8, 0.0))
DEFAULT_W = ((0.0, 1.0, 1.0), (1.0, 0.0, 0.5), (1.0, 0.5, 0.0))

class BlankDriver(GeomDriver):
    """Zero energy and zero gradient everywhere."""

    def calc_new(self, coords, dirname):
        return GradientResult(energy=0.0, gradient=np.zeros(len(coords)))

class HarmonicModel:
    """
    Pairwise harmonic model.

    E = sum_ij w_ij (|r_i - r_j| - b_ij)^2

    The last evaluated coordinates and energy are kept in ``current_coords``
    and ``current_energy``; they change after every optimization step.
    """

    def __init__(self, b=DEFAULT_B, w=DEFAULT_W):
        self.b = np.array(b, dtype=float)
        self.w = np.array(w, dtype=float)
        if self.b.shape != self.w.shape or self.b.ndim != 2 or self.b.shape[0] != self.b.shape[1]:
            raise ValueError(f"b and w must be square matrices of equal shape, got {self.b.shape} and {self.w.shape}")
        self.current_coords: Optional[np.ndarray] = None
        self.current_energy: Optional[float] = None

    @property
    def natoms(self) -> int:
        return self.b.shape[0]

    def calc_eng_grad(self, coords) -> GradientResult:
        """Energy and flattened gradient at ``coords`` (flat, natom * 3)."""
        coords = np.asarray(coords, dtype=float).reshape(-1, 3)
        if coords.shape[0] != self.natoms:
            raise ValueError(f"Model has {self.natoms} atoms, got coordinates for {coords.shape[0]}")
        self.current_coords = coords.reshape(-1).copy()

        dr = coords[:, None, :] - coords
        dist = np.linalg.norm(dr, axis=2)
        energy = float((self.w * (dist - self.b) ** 2).sum())

        tmp = 2 * self.w * (dist - self.b) / (dist + 1e-60)
        grad = np.einsum('ij,ijx->ix', tmp, dr)
        grad -= np.einsum('ij,ijx->jx', tmp, dr)

        self.current_energy = energy
        return GradientResult(energy=energy, gradient=grad.reshape(-1))

class ModelDriver(GeomDriver):
    """
    Driver passing a model to geomeTRIC.

    The driver only holds a reference to the model, so the model instance
    (and whatever state it recorded) is still available to the caller after
    the optimization.
    """

    def __init__(self, model: HarmonicModel):
        self.model = model

    def calc_new(self, coords, dirname):
        return self.model.calc_eng_grad(coords)
