"""Route tree import resolution — resolves ``"module:attribute"`` strings.

Used by ``routemap routes`` to locate a route tree from a user-supplied
import string.
"""

import importlib
from collections.abc import Mapping

from routemap.tree import RouteTree, define_routes


def resolve_routes(import_string: str) -> RouteTree:
    """Resolve an import string to a ``RouteTree``.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"routes"`` (e.g. ``"myapp.urls"`` resolves
    to ``myapp.urls.routes``).

    Supports factory functions: if the resolved object is callable and
    not a mapping, it is called.  Plain nested mappings are passed
    through ``define_routes()``.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a mapping of routes.
        ConfigurationError: If the mapping is not a valid route tree.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Mapping):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Mapping):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a route tree"
        raise TypeError(msg)

    return define_routes(obj)
