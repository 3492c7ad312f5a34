"""Priority-ordered study goal tracking with a console menu, plus a few small algorithms."""

__version__ = "0.1.0"
__all__ = ["algorithms", "cli", "complex_number", "linked", "tracker"]