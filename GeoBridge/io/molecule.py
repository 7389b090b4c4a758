"""
Construction of ``geometric.molecule.Molecule`` objects.
"""

import numpy as np
from typing import Sequence

from ..errors import CoordinateShapeError
from ..models.datatypes import Geometry

def init_molecule(elem: Sequence[str], xyzs):
    """
    Initialize a geomeTRIC molecule.

    Args:
        elem: Element symbols, one per atom.
        xyzs: List of structures in Angstrom. Each structure is either flat
            (natom * 3) or shaped (natom, 3). Most optimizations need only
            one; NEB-like tasks may pass several.

    Returns:
        geometric.molecule.Molecule with ``elem`` and ``xyzs`` set. Each entry
        of ``xyzs`` is a (natom, 3) numpy array; geomeTRIC rejects flat
        arrays and plain lists.
    """
    from geometric.molecule import Molecule

    elem = list(elem)
    natoms = len(elem)
    arrays = []
    for k, xyz in enumerate(xyzs):
        arr = np.array(xyz, dtype=float)
        if arr.size != natoms * 3:
            raise CoordinateShapeError(f"Structure {k} has {arr.size} coordinates, expected {natoms * 3} for {natoms} atoms")
        arrays.append(arr.reshape(-1, 3))
    if not arrays:
        raise CoordinateShapeError("At least one structure is required")

    molecule = Molecule()
    molecule.elem = elem
    molecule.xyzs = arrays
    return molecule

def molecule_from_geometry(g: Geometry):
    """Build a one-structure geomeTRIC molecule from a Geometry."""
    return init_molecule(g.symbols, [g.coords])
