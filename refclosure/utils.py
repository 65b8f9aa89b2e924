"""Shared utility functions."""
import os
from pathlib import Path


def get_project_root() -> Path:
    """
    Get the package root directory.

    Returns:
        Path to the refclosure package
    """
    return Path(__file__).parent


def get_metamodel_path(filename: str = None) -> Path:
    """
    Get path to metamodel config directory or file.

    Args:
        filename: Optional metamodel filename

    Returns:
        Path to metamodel directory or specific metamodel file
    """
    metamodel_dir = get_project_root() / "metamodel"
    if filename:
        return metamodel_dir / filename
    return metamodel_dir


class Config:
    """Configuration constants."""

    # Package to clean (the -p flag wins over this)
    PACKAGE = os.getenv("REFCLOSURE_PACKAGE")

    # Input / output locations
    REFERENCES_ROOT = os.getenv("REFERENCES_ROOT", "..")
    OUTPUT_DIR = os.getenv("REFERENCES_OUTPUT_DIR", "src/directory/apiReferences")

    # Metamodel files
    EDGE_KINDS_PATH = os.getenv(
        "EDGE_KINDS_PATH",
        str(get_metamodel_path("edge_kinds.yaml"))
    )
    PACKAGE_CATEGORIES_PATH = os.getenv(
        "PACKAGE_CATEGORIES_PATH",
        str(get_metamodel_path("package_categories.yaml"))
    )
