from __future__ import annotations

"""
Utilities for dynamic imports.

This module centralizes the logic to load objects from string references
formatted as "module.path:AttrName" (used by the CLI to plug in a custom
script executor).

Public API:
    - load_object_from_ref(ref): object
    - instantiate_from_ref(ref, expected): instance of a Protocol
"""

import importlib
from typing import Any


def load_object_from_ref(ref: str) -> Any:
    """Load an attribute from a module given a 'module:attr' reference.

    Args:
        ref: Reference in the form 'module.path:AttrName'.

    Returns:
        The attribute resolved from the given module.

    Raises:
        ImportError: If the reference is malformed or cannot be resolved.
    """
    module_name, sep, obj_name = (ref or '').partition(':')
    if not module_name or not sep or (not obj_name):
        raise ImportError(f"Invalid reference '{ref}'. Expected 'module.path:AttrName'.")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ImportError(f"Failed to import module '{module_name}': {exc}") from exc
    try:
        return getattr(module, obj_name)
    except AttributeError as exc:
        raise ImportError(f"Module '{module_name}' has no attribute '{obj_name}'") from exc


def instantiate_from_ref(ref: str, expected: type) -> Any:
    """Load a class from *ref*, build it without arguments and check its type.

    Used for plug-in components named on the command line (``--executor``),
    where *expected* is a runtime-checkable Protocol.

    Raises:
        ImportError: If the reference cannot be resolved, the object cannot be
            called without arguments, or the result does not satisfy
            *expected*.
    """
    factory = load_object_from_ref(ref)
    if not callable(factory):
        raise ImportError(f"'{ref}' is not a class or factory")
    try:
        instance = factory()
    except TypeError as exc:
        raise ImportError(f"Cannot instantiate '{ref}' without arguments: {exc}") from exc
    if not isinstance(instance, expected):
        raise ImportError(
            f"'{ref}' produced {type(instance).__name__}, which is not a {expected.__name__}"
        )
    return instance
