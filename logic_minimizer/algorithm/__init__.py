"""Concrete minimizers. Classes here are named by class alone in algorithm names."""

from .quine_mccluskey import QuineMcCluskey

__all__ = ["QuineMcCluskey"]
