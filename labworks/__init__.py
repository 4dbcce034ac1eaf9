"""Text transforms, a matrix type, book record files, and TCP, UDP and named-pipe file processing tools."""

__version__ = "0.1.0"