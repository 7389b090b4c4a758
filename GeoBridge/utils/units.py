"""
Physical constants and unit conversions for GeoBridge.

geomeTRIC hands coordinates to engines in Bohr and expects energies in
Hartree and gradients in Hartree/Bohr. ASE works in Angstrom and eV.
"""

import numpy as np

# Atomic units (CODATA 2018)
BOHR_TO_ANG = 0.529177210903  # Bohr to Angstroms
HARTREE_TO_EV = 27.211386245988  # Hartree to eV
EV_TO_HARTREE = 1.0 / HARTREE_TO_EV

def bohr_to_ang(coords):
    """Convert coordinates from Bohr to Angstroms."""
    return np.asarray(coords, dtype=float) * BOHR_TO_ANG

def eV_to_hartree(energy_eV):
    """Convert energy from eV to Hartree."""
    return energy_eV * EV_TO_HARTREE

def forces_to_gradient(forces_eV_ang):
    """Convert ASE forces (eV/Å) to a flat gradient in Hartree/Bohr."""
    forces = np.asarray(forces_eV_ang, dtype=float).reshape(-1)
    return -forces * EV_TO_HARTREE * BOHR_TO_ANG
