"""basset: internalize CDN and local front-end assets into controlled storage."""

from basset.version import __version__

__all__ = ["__version__"]
