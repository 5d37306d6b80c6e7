from __future__ import annotations

"""
Dynamic loading of user-supplied classifiers.

References use the "module.path:AttrName" form, e.g.
``TEXTINTERP_CLASSIFIER=myproject.markers:DollarClassifier``.
"""

import importlib
from typing import Any


def load_object_from_ref(ref: str) -> Any:
    """Load an attribute from a module given a 'module:attr' reference.

    Dotted attribute paths after the colon are followed
    ("pkg.mod:Outer.Inner").

    Raises:
        ImportError: If the reference is malformed or cannot be resolved.
    """
    module_name, sep, attr_path = (ref or '').strip().partition(':')
    if not module_name or not sep or not attr_path:
        raise ImportError(f"invalid reference {ref!r}; expected 'module.path:AttrName'")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ImportError(f"failed to import module {module_name!r}: {exc}") from exc
    for part in attr_path.split('.'):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ImportError(f"{module_name!r} has no attribute {attr_path!r}") from exc
    return obj
