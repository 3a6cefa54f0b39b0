"""A two-player arcade game set in a demon goat's hair salon, built on pygame."""

__version__ = "0.1.0"