"""songtags - tag storage, rendering and filtering for media catalog items."""

from songtags.__version__ import __version__

__all__ = ["__version__"]
