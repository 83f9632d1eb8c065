"""mdbook preprocessor that shows or hides sections depending on linked issues."""

__version__ = "0.1.0"
