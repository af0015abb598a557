"""Run two commands joined by a pipe between an input file and an output file, with small character, buffer, string and number helpers."""

__version__ = "1.0.0"