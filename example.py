#!/usr/bin/env python3
"""
Example usage of GeoBridge: transition-state search with a custom driver.

This script demonstrates the basic workflow:
1. Implement (or reuse) a model that computes energy and gradient
2. Wrap it in a driver and attach it to a geomeTRIC engine
3. Run the optimizer with parameters written in TOML
4. Read the optimized structure back from the result and from the model

Note that this example searches for a transition state. For an ordinary
geometry optimization, set ``transition = false`` (the default).
"""

import logging

from GeoBridge import init_molecule, make_engine, params_from_text, run_optimization
from GeoBridge import final_coords, final_energy
from GeoBridge.drivers.model import HarmonicModel, ModelDriver

OPTIMIZER_PARAMS = """
transition           = true    # evaluate transition state instead of local minimum
convergence_energy   = 1.0e-8  # Eh
convergence_grms     = 1.0e-6  # Eh/Bohr
convergence_gmax     = 1.0e-6  # Eh/Bohr
convergence_drms     = 1.0e-4  # Angstrom
convergence_dmax     = 1.0e-4  # Angstrom
"""

def main():
    """Run example GeoBridge calculation."""
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    print("GeoBridge Example: transition state of a harmonic model")
    print("=" * 50)

    # Stands in for an SCF/MP2/CC gradient code; it records the last
    # coordinates and energy it was evaluated at.
    model = HarmonicModel()

    # Water-like starting structure (Angstrom). xyzs is a list of structures;
    # one is enough for a single optimization.
    molecule = init_molecule(['O', 'H', 'H'], [[0.0, 0.3, 0.0, 0.9, 0.8, 0.0, -0.9, 0.5, 0.0]])

    # The driver only references the model, so the model stays usable after
    # the run.
    engine = make_engine(molecule, ModelDriver(model))

    # With input=None geomeTRIC logs into a temporary file that is removed
    # afterwards.
    params = params_from_text(OPTIMIZER_PARAMS)
    result = run_optimization(engine, params, input=None)

    # Same as list(result.xyzs[-1].flatten()) and result.qm_energies[-1].
    print(f"Optimized coordinates (Angstrom): {final_coords(result)}")
    print(f"Optimized energy (Eh): {final_energy(result):.10f}")

    # For this model the transition state lies at 0.32 Eh.
    assert abs(final_energy(result) - 0.32) < 1.0e-8

    # The model was mutated during the optimization.
    print(f"Last energy seen by the model (Eh): {model.current_energy:.10f}")
    print(f"Gradient evaluations: {engine.driver_handle.ncalls}")

if __name__ == "__main__":
    main()
