"""Run two commands joined by a pipe between an input file and an output file, with supporting string, character, number, memory, list and output helpers."""

__version__ = "0.1.0"