"""jtab: project JSON records onto CSV/TSV columns."""

from .core import convert
from .errors import JtabError
from .models import ConvertConfig

__all__ = ["__version__", "ConvertConfig", "JtabError", "convert"]

__version__ = "0.1.0"
