"""Runtime values of the PiScript language and a library of its built-in functions."""

__version__ = "0.1.0"