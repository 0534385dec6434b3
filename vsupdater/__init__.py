"""Updater for Vintage Story server and client installations."""

__version__ = "0.1.0"
__all__ = ["cli", "fsutils", "logger", "remote", "version"]