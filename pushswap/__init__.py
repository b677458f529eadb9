"""Sort integers with two stacks and the push_swap operations."""

__version__ = "0.1.0"
__all__ = ["cli", "costs", "parsing", "sorting", "stacks"]