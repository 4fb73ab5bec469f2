"""Small worked programming examples: data types, matching, collections, errors, closures and threads."""

__version__ = "0.1.0"