"""Parameter files: PhysicalParameters as a flat JSON object."""

import json
from pathlib import Path
from typing import Union

from pendulab.core.state import PhysicalParameters


def save_parameters(parameters: PhysicalParameters, path: Union[str, Path]) -> None:
    """Write ``parameters`` to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(parameters.to_dict(), indent=2) + "\n", encoding="utf-8")


def load_parameters(path: Union[str, Path]) -> PhysicalParameters:
    """
    Read PhysicalParameters from JSON. Missing keys take their defaults.

    Raises:
        ValueError: if the file is not a JSON object or holds unknown keys.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return PhysicalParameters.from_dict(data)
