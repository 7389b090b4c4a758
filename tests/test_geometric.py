"""
End-to-end tests against the real geomeTRIC optimizer.

The transition-state case follows geomeTRIC's own custom-engine test.
"""

import os

import numpy as np
import pytest

geometric = pytest.importorskip("geometric")

from GeoBridge import (
    Geometry, get_engine_cls, make_engine, init_molecule, molecule_from_geometry,
    params_from_text, run_optimization, final_coords, final_energy
)
from GeoBridge.drivers.model import BlankDriver, HarmonicModel, ModelDriver
from GeoBridge.errors import CoordinateShapeError

ELEM = ['O', 'H', 'H']
XYZ = [0.0, 0.3, 0.0, 0.9, 0.8, 0.0, -0.9, 0.5, 0.0]

TS_PARAMS = """
transition           = true    # evaluate transition state instead of local minimum
convergence_energy   = 1.0e-8  # Eh
convergence_grms     = 1.0e-6  # Eh/Bohr
convergence_gmax     = 1.0e-6  # Eh/Bohr
convergence_drms     = 1.0e-4  # Angstrom
convergence_dmax     = 1.0e-4  # Angstrom
"""

@pytest.fixture
def molecule():
    return init_molecule(ELEM, [XYZ])

class TestMolecule:
    """Test construction of geomeTRIC molecules."""

    def test_init_molecule(self, molecule):
        """Test building a molecule."""
        assert molecule.elem == ELEM
        assert len(molecule.xyzs) == 1
        assert molecule.xyzs[0].shape == (3, 3)
        assert np.allclose(molecule.xyzs[0].reshape(-1), XYZ)

    def test_from_geometry(self):
        """Test building from a Geometry."""
        coords = [tuple(XYZ[i:i + 3]) for i in range(0, 9, 3)]
        molecule = molecule_from_geometry(Geometry(symbols=ELEM, coords=coords))

        assert molecule.xyzs[0].shape == (3, 3)

    def test_bad_length(self):
        """Test coordinates of the wrong size."""
        with pytest.raises(CoordinateShapeError):
            init_molecule(ELEM, [XYZ[:-1]])

class TestEngine:
    """Test the engine class composed with geometric.engine.Engine."""

    def test_is_engine(self, molecule):
        """Test that the engine is a geomeTRIC Engine."""
        from geometric.engine import Engine

        engine = make_engine(molecule, BlankDriver())

        assert isinstance(engine, Engine)
        assert get_engine_cls() is type(engine)
        assert len(engine.M.elem) == 3

    def test_calc_new(self, molecule):
        """Test calc_new through geomeTRIC's engine."""
        engine = make_engine(molecule, ModelDriver(HarmonicModel()))
        out = engine.calc_new(np.array(XYZ), "unused")

        assert isinstance(out["gradient"], np.ndarray)
        assert out["gradient"].shape == (9,)

class TestOptimization:
    """Run geomeTRIC through GeoBridge."""

    def test_blank_driver(self, molecule):
        """Test optimizing with a zero driver."""
        engine = make_engine(molecule, BlankDriver())

        result = run_optimization(engine)

        assert len(result.xyzs) >= 1
        assert len(final_coords(result)) == 9

    def test_transition_state(self, molecule):
        """Test the transition-state search."""
        model = HarmonicModel()
        engine = make_engine(molecule, ModelDriver(model))
        params = params_from_text(TS_PARAMS)
        before = dict(params)

        result = run_optimization(engine, params)

        assert final_energy(result) == pytest.approx(0.32, abs=1e-6)
        assert model.current_energy == pytest.approx(final_energy(result), abs=1e-6)
        assert params == before
        assert "customengine" not in params

    def test_explicit_input_keeps_log(self, molecule, tmp_path):
        """Test that an explicit input keeps its output."""
        engine = make_engine(molecule, ModelDriver(HarmonicModel()))
        path = tmp_path / "run.in"
        path.write_text("")

        run_optimization(engine, params_from_text("maxiter = 300"), input=str(path))

        assert path.exists()
        assert os.listdir(tmp_path) != ["run.in"]
