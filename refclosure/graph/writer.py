"""Persist a reference closure as JSON."""

import json
from pathlib import Path
from typing import Any, Dict


class PersistenceError(OSError):
    pass


class ReferenceWriter:
    """Writes closures to <output_dir>/<package>.json."""

    def __init__(self, output_dir: str = "src/directory/apiReferences", indent: int = 2):
        self.output_dir = Path(output_dir)
        self.indent = indent

    def output_path(self, package: str) -> Path:
        return self.output_dir / f"{package}.json"

    def dumps(self, references: Dict[Any, Any]) -> str:
        """Serialize a closure; integer keys become strings."""
        return json.dumps(references, indent=self.indent, ensure_ascii=False)

    def write(self, package: str, references: Dict[Any, Any]) -> Path:
        """
        Write the closure for a package.

        Returns:
            Path written

        Raises:
            PersistenceError: if the closure cannot be serialized or written
        """
        path = self.output_path(package)
        try:
            content = self.dumps(references)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"Could not write {path}: {e}") from e
        return path
