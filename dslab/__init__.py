"""Hash tables, search trees, heaps, graphs and a binary record file, each with a console program."""

__version__ = "0.1.0"