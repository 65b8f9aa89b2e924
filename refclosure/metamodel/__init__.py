"""Metamodel configuration: edge kinds and package categories."""

from .loader import CategoryLoader, PackageCategories, UnknownPackageError

__all__ = ['CategoryLoader', 'PackageCategories', 'UnknownPackageError']
