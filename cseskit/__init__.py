"""Functions and a command line for classic competitive-programming problems."""

__version__ = "0.1.0"