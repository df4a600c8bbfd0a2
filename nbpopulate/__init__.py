"""nbpopulate: seed a notebook workspace without clobbering user edits."""

__version__ = "0.1.0"
