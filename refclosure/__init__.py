"""Extract self-contained reference subsets from TypeDoc reference documents."""

from .closure import ClosureEngine, ClosureResult, EdgeTaxonomy, compute_closure

__version__ = "0.1.0"

__all__ = ['ClosureEngine', 'ClosureResult', 'EdgeTaxonomy', 'compute_closure']
