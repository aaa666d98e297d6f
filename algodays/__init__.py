"""Classic algorithms for sorting, searching, graphs, intervals, counting and strings, with a command-line front end."""

__version__ = "0.1.0"