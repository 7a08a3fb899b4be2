"""Sort integers with two stacks and the push_swap set of moves."""

__version__ = "0.1.0"