import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as version_metadata
from typing import Any

from eth_utils import is_hex, to_hex

DISTRIBUTION_NAME = "eth-bundle-sim"

_python_version = (
    f"{sys.version_info.major}.{sys.version_info.minor}"
    f".{sys.version_info.micro} {sys.version_info.releaselevel}"
)


def get_package_version(distribution: str = DISTRIBUTION_NAME) -> str:
    """
    Get the installed version of a distribution.

    Args:
        distribution (str): The name of the distribution on the package index.

    Returns:
        str: version string, or an empty string when it is not installed.
    """
    try:
        return str(version_metadata(distribution))

    except PackageNotFoundError:
        # NOTE: Must handle empty string result here
        return ""


__version__ = get_package_version()


def to_int(value: Any) -> Any:
    """
    Convert a ``0x``-prefixed hex quantity to an ``int``.
    Anything else is returned as-is so validation can report it.
    """
    if isinstance(value, str) and value.startswith(("0x", "0X")) and is_hex(value):
        # NOTE: A bare "0x" is how some nodes encode zero.
        return int(value, 16) if len(value) > 2 else 0

    return value


def to_quantity(value: int) -> str:
    """
    Encode an ``int`` as a JSON-RPC hex quantity, e.g. ``21000`` -> ``"0x5208"``.
    """
    return to_hex(value)


__all__ = ["__version__", "get_package_version", "to_int", "to_quantity"]
