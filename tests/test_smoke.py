"""Smoke test to verify the project is set up correctly."""

import py_netsim
from py_netsim import __doc__


def test_package_is_importable() -> None:
    """Verify that py_netsim can be imported."""
    assert __doc__ is not None


def test_public_names_exported() -> None:
    """Every name in __all__ is reachable from the package."""
    for name in py_netsim.__all__:
        assert hasattr(py_netsim, name)
