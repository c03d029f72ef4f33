"""Core business logic layer.

Subpackages:
- text: term normalization and display names
- translation: pantry vocabulary -> recipe vocabulary lookup
- matching: owned/missing classification and missing-list merging
- recipes: cached recipe search against the provider
- pantry: pantry terms and the manual translation workflow
- shopping: shopping list and multi-recipe missing lists

Everything under text, translation and matching is pure and synchronous.
"""
__all__ = ["text", "translation", "matching", "recipes", "pantry", "shopping"]
