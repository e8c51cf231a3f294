"""Two-stack sorting with a limited set of operations: stacks, parsing, small sorts, radix sort and a command line."""

__version__ = "1.0.0"
__all__ = ["cli", "minisort", "operations", "parsing", "radix"]