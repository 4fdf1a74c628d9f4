"""
checkout-merge - Check out a branch, merge another into it, and optionally delete the source
"""

from .__version__ import __version__
from .core import MergeWorkflow

__all__ = ["MergeWorkflow", "__version__"]
