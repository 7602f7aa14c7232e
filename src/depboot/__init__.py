"""
depboot - early-startup bootstrapper for vendored Python packages

depboot decides, before the rest of an application is imported, whether the
vendored package tree matches the declared manifest and the running
interpreter, and installs it through pip when it does not.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
