"""Reference document I/O and graph views."""

from .loader import ReferenceIndex, ReferenceLoader, ReferenceNotFoundError, index_references
from .writer import PersistenceError, ReferenceWriter

__all__ = [
    'ReferenceIndex',
    'ReferenceLoader',
    'ReferenceNotFoundError',
    'index_references',
    'PersistenceError',
    'ReferenceWriter',
]
