"""
Services Layer

Business logic for the goods, categories and users resources.
Every operation returns a Result: either a value or a classified failure.
"""

__all__ = []
