"""
ASE calculator factory.
"""

from ase.calculators.emt import EMT
from importlib import import_module

from ..models.datatypes import CalcSpec

# Optional calculators are imported lazily in make_calculator() so the
# package loads without them.

# name -> (module, class)
_CALCULATORS = {
    "morse": ("ase.calculators.morse", "MorsePotential"),
    "lennardjones": ("ase.calculators.lj", "LennardJones"),
    "lj": ("ase.calculators.lj", "LennardJones"),
    "tblite": ("tblite.ase", "TBLite"),
    "xtb": ("tblite.ase", "TBLite"),
}

def make_calculator(spec: CalcSpec):
    """
    Return an ASE calculator instance.

    "emt" is built in; "lj", "morse" and "tblite"/"xtb" are imported on
    demand. Unknown names, or calculators whose module is not installed,
    raise ValueError.
    """
    name = (spec.ase_calculator or "emt").lower()
    kwargs = dict(spec.calc_kwargs or {})

    if name == "emt":
        return EMT(**kwargs)

    mod_cls = _CALCULATORS.get(name)
    if mod_cls is None:
        raise ValueError(f"Unknown ASE calculator {spec.ase_calculator!r}; known: emt, {', '.join(sorted(_CALCULATORS))}")

    mod_name, class_name = mod_cls
    try:
        cls = getattr(import_module(mod_name), class_name)
    except (ImportError, AttributeError) as e:
        raise ValueError(f"Calculator {spec.ase_calculator!r} requires {mod_name}.{class_name}, which is not available") from e

    if mod_name == "tblite.ase":
        kwargs.setdefault("method", "GFN2-xTB")
        kwargs.setdefault("charge", spec.charge)
        kwargs.setdefault("uhf", max(spec.spin_multiplicity - 1, 0))
    return cls(**kwargs)
