import importlib
from functools import lru_cache

METHODS_PACKAGE = "oregon_protocols.methods"


@lru_cache(maxsize=None)
def resolve_method(path: str):
    """
    Turn a string like 'temphydro.common_temphydro' into the decode function.

    The format is "module.function" where module is a submodule of
    oregon_protocols.methods.

    Args:
        path: Path in the format 'module.function'

    Returns:
        Callable decode method

    Raises:
        ValueError: if the path is not of the form 'module.function'
        AttributeError: if the function does not exist in the module
    """
    if "." not in path:
        raise ValueError(f"Invalid method path: {path}. Expected format: 'module.function'")

    module_name, method_name = path.rsplit(".", 1)
    module = importlib.import_module(f"{METHODS_PACKAGE}.{module_name}")

    method = getattr(module, method_name, None)
    if method is None:
        raise AttributeError(
            f"Method '{method_name}' not found in {METHODS_PACKAGE}.{module_name} "
            f"(path: {path})"
        )
    return method
