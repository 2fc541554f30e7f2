"""olocus-site: SEO validation and documentation sync for the Olocus website."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("olocus-site")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = ["__version__"]
