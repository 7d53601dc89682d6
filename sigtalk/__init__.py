"""Send text between processes bit by bit over SIGUSR1 and SIGUSR2, with the
string, character, memory, output, list and printf helpers it is built from."""

__version__ = "0.1.0"