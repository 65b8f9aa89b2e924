"""
Reference closure package.

This package provides:
- Edge kind taxonomy loading
- Id / inline edge value classification
- Memoized depth-first closure over a reference index
"""

from .taxonomy import EdgeTaxonomy
from .engine import ClosureEngine, ClosureResult, compute_closure

__all__ = ['EdgeTaxonomy', 'ClosureEngine', 'ClosureResult', 'compute_closure']
