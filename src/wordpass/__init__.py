"""Memorable multi-word passphrase generation.

The public entry points are :func:`wordpass.config.load_config` for building a
validated :class:`~wordpass.config.Settings` and
:class:`~wordpass.service.GeneratorService` for turning those settings into
passwords.  The command line interface lives in :mod:`wordpass.cli`.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
