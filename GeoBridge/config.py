"""
Optimizer parameter handling for GeoBridge.

Parameters for ``geometric.optimize.run_optimizer`` are written as a TOML
table (or, for files, YAML), for example::

    transition         = true    # transition state instead of minimum
    convergence_energy = 1.0e-8  # Eh
    convergence_grms   = 1.0e-6  # Eh/Bohr

and converted into a plain ``dict`` of Python builtins that is passed to
geomeTRIC as keyword arguments.
"""

import importlib
import logging
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml
from pydantic import ValidationError

from .errors import ConfigParseError, ConfigTypeError, MarshalingError
from .models.datatypes import OptimizerParams

logger = logging.getLogger(__name__)

def _import_toml_module():
    try:
        return importlib.import_module("tomllib")
    except ModuleNotFoundError:
        return importlib.import_module("tomli")

_toml = _import_toml_module()

def parse_config_text(text: str) -> Dict[str, Any]:
    """Parse TOML text into a tree of builtins."""
    try:
        return _toml.loads(text)
    except _toml.TOMLDecodeError as e:
        raise ConfigParseError(f"Failed to parse TOML string: {e}", diagnostic=str(e)) from e

def _format_timestamp(value) -> str:
    # RFC 3339, as TOML writes it; UTC offsets are written as "Z"
    if isinstance(value, datetime):
        text = value.isoformat()
        if value.utcoffset() == timedelta(0):
            text = text[: -len("+00:00")] + "Z"
        return text
    return value.isoformat()

def convert_value(value, path: str = "") -> Any:
    """
    Convert one configuration value into the builtins geomeTRIC accepts.

    Strings, integers, floats and booleans are kept as they are (booleans are
    never turned into 0/1). Dates and times become their RFC 3339 text.
    Arrays become new lists and tables new dicts, in their original order.
    """
    if isinstance(value, bool):
        return bool(value)
    if isinstance(value, (str, int, float)):
        return value
    if isinstance(value, (datetime, date, time)):
        return _format_timestamp(value)
    if isinstance(value, (list, tuple)):
        return [convert_value(item, f"{path}[{i}]") for i, item in enumerate(value)]
    if isinstance(value, Mapping):
        out = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise MarshalingError(f"Table keys must be strings, got {key!r} at {path or '<root>'}")
            out[key] = convert_value(item, f"{path}.{key}" if path else key)
        return out
    raise MarshalingError(f"Unsupported value {value!r} of type {type(value).__name__} at {path or '<root>'}")

def convert_root(value) -> Dict[str, Any]:
    """Convert a configuration tree whose root must be a table."""
    if not isinstance(value, Mapping):
        raise ConfigTypeError(f"Configuration must represent a table, got {type(value).__name__}")
    return convert_value(value)

def validate_params(params: Mapping[str, Any]) -> Mapping[str, Any]:
    """Type-check the keys geomeTRIC is known to use; returns ``params`` unchanged."""
    try:
        OptimizerParams.model_validate(dict(params))
    except ValidationError as e:
        raise ConfigTypeError(f"Invalid optimizer parameters:\n{e}") from e
    return params

def params_from_text(text: str) -> Dict[str, Any]:
    """Parse TOML text into validated optimizer parameters."""
    params = convert_root(parse_config_text(text))
    return validate_params(params)

def load_params(config_file: Union[str, Path]) -> Dict[str, Any]:
    """Load optimizer parameters from a ``.toml``, ``.yml`` or ``.yaml`` file."""
    path = Path(config_file)
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if suffix == ".toml":
        tree = parse_config_text(text)
    elif suffix in (".yml", ".yaml"):
        try:
            tree = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigParseError(f"Failed to parse YAML file {path}: {e}", diagnostic=str(e)) from e
        if tree is None:
            tree = {}
    else:
        raise ConfigParseError(f"Unsupported parameter file type {suffix!r} for {path}; use .toml, .yml or .yaml")

    params = validate_params(convert_root(tree))
    logger.info("Loaded %d optimizer parameters from %s", len(params), path)
    return params
