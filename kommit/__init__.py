"""Conventional commit message generator backed by OpenAI chat models."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("kommit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
