"""Classic algorithm routines on arrays, strings, numbers, linked lists, trees and grids."""

__version__ = "0.1.0"