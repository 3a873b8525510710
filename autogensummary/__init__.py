"""Generate an mdBook SUMMARY.md from a book's source directory, by hand or as a preprocessor."""

__version__ = "0.1.10"
__all__ = ["__version__"]