"""greeter package initialization."""

from .core import DEFAULT_USER, GREETING_PREFIX, greet

__all__ = ["greet", "DEFAULT_USER", "GREETING_PREFIX", "__version__"]
__version__ = "0.1.0"
