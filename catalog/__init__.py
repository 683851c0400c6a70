"""Course catalog service: programming languages, modules and learning materials."""

__version__ = "0.1.0"
