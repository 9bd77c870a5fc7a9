"""Convention-inference linter: elect the majority idiom, flag the rest."""

__version__ = "0.1.0"
