"""Personal book shelf over a SQLite catalogue: favourites, reviews, notes and a command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]