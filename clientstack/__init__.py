from clientstack.version import __version__

name = "clientstack"

__all__ = ["__version__", "name"]
