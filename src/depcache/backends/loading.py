"""Resolve a cache backend from a dotted import path."""

from __future__ import annotations

import importlib
import inspect
import sys
from pathlib import Path

from depcache.backends.base import CacheBackend


def load_backend(backend_path: str) -> CacheBackend:
    """
    Load a cache backend from a module path.

    The attribute may be a `CacheBackend` instance, a `CacheBackend` subclass, or a
    zero-argument factory returning an instance.

    Args:
        backend_path: Dotted path to the backend (e.g., 'mypackage.backends.s3_backend').

    Returns:
        The loaded CacheBackend instance.

    Raises:
        ValueError: If the backend path is invalid.
        ModuleNotFoundError: If the module cannot be found.
        AttributeError: If the attribute does not exist in the module.
        TypeError: If the loaded object does not produce a CacheBackend.
    """
    if "." not in backend_path:
        raise ValueError(
            f"Invalid backend path: '{backend_path}'. Expected format: 'module.backend_name'"
        )

    module_path, attr_name = backend_path.rsplit(".", 1)

    # Add current directory to Python path if not already there
    cwd = str(Path.cwd())
    if cwd not in sys.path:  # pragma: no cover
        sys.path.insert(0, cwd)

    module = importlib.import_module(module_path)

    if not hasattr(module, attr_name):
        raise AttributeError(f"Backend '{attr_name}' not found in module '{module_path}'")

    obj = getattr(module, attr_name)
    if inspect.isclass(obj) or (callable(obj) and not isinstance(obj, CacheBackend)):
        obj = obj()

    if not isinstance(obj, CacheBackend):
        raise TypeError(f"'{backend_path}' is not a CacheBackend (got {type(obj).__name__})")

    return obj
