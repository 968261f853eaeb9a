"""Binary trees and binary search trees with parent links, Graphviz dot output, and a demo command."""

__version__ = "0.1.0"
__all__ = ["tree", "bst", "dot", "cli"]