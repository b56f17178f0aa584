"""Run one or two piped commands from an input file to an output file."""

__version__ = "0.1.0"