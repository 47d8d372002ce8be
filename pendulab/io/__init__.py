"""Parameter files."""

from pendulab.io.serializers import load_parameters, save_parameters

__all__ = ["save_parameters", "load_parameters"]
