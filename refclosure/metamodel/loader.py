"""Package category loading utilities."""
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, List, Optional


class UnknownPackageError(ValueError):
    pass


@dataclass(frozen=True)
class PackageCategories:
    """Seed configuration for one package"""
    package: str
    root_package: Optional[str]
    categories: Dict[str, str]
    sub_categories: Dict[str, str]

    def seed_names(self) -> List[str]:
        """Category names followed by sub-category names, in file order"""
        return list(self.categories.values()) + list(self.sub_categories.values())


class CategoryLoader:
    """Loads the per-package seed categories."""

    def __init__(self, config_path: str = None):
        """
        Initialize the category loader.

        Args:
            config_path: Path to package_categories.yaml. If None, uses the file
                shipped with the package.
        """
        if config_path is None:
            config_path = Path(__file__).parent / "package_categories.yaml"
        self.config_path = Path(config_path)
        self._config: Optional[Dict[str, Any]] = None

    def load_config(self) -> Dict[str, Any]:
        """
        Load the category configuration.

        Returns:
            Dictionary keyed by package name
        """
        if self._config is None:
            with open(self.config_path, "r") as f:
                raw = yaml.safe_load(f) or {}
            self._config = raw.get("packages") or {}
        return self._config

    def get_packages(self) -> list[str]:
        """
        Get list of packages with a category configuration.

        Returns:
            List of package names
        """
        return list(self.load_config().keys())

    def get_package(self, package: str) -> PackageCategories:
        """
        Get the seed configuration for a package.

        Args:
            package: Package identifier, e.g. "amplify-js"

        Returns:
            PackageCategories for the package

        Raises:
            UnknownPackageError: if the package has no configuration
        """
        config = self.load_config()
        if package not in config:
            raise UnknownPackageError(
                f"No categories configured for package {package!r}. "
                f"Known packages: {sorted(config)}"
            )

        entry = config[package] or {}
        return PackageCategories(
            package=package,
            root_package=entry.get("root_package"),
            categories=dict(entry.get("categories") or {}),
            sub_categories=dict(entry.get("sub_categories") or {}),
        )

    def get_seed_names(self, package: str) -> list[str]:
        """
        Get the ordered seed category names for a package.

        Args:
            package: Package identifier

        Returns:
            Category names, then sub-category names
        """
        return self.get_package(package).seed_names()
