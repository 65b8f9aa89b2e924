"""
Clean a package's reference.json down to what its API categories use.

Usage:
    clean-references -p amplify-js

The -p flag names the package checked out next to this repo: with the default
settings, ../amplify-js/docs/reference.json is read and the cleaned references
are written to src/directory/apiReferences/amplify-js.json.
"""
import argparse
import sys
from typing import List, Optional

from .closure import ClosureEngine, ClosureResult, EdgeTaxonomy
from .graph import PersistenceError, ReferenceLoader, ReferenceWriter
from .metamodel import CategoryLoader
from .utils import Config


class ConfigurationError(ValueError):
    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract the references reachable from a package's API categories."
    )
    parser.add_argument(
        '-p', '--package',
        type=str,
        default=None,
        help='Package whose references to clean (default: $REFCLOSURE_PACKAGE)'
    )
    parser.add_argument(
        '--references-root',
        type=str,
        default=Config.REFERENCES_ROOT,
        help='Directory holding <package>/docs/reference.json (default: %(default)s)'
    )
    parser.add_argument(
        '--output-dir',
        type=str,
        default=Config.OUTPUT_DIR,
        help='Directory to write <package>.json to (default: %(default)s)'
    )
    parser.add_argument(
        '--edge-kinds',
        type=str,
        default=Config.EDGE_KINDS_PATH,
        help='Edge kind taxonomy YAML'
    )
    parser.add_argument(
        '--categories-file',
        type=str,
        default=Config.PACKAGE_CATEGORIES_PATH,
        help='Package categories YAML'
    )
    return parser


def clean_references(
    package: Optional[str],
    references_root: str = Config.REFERENCES_ROOT,
    edge_kinds: str = Config.EDGE_KINDS_PATH,
    categories_file: str = Config.PACKAGE_CATEGORIES_PATH,
) -> ClosureResult:
    """
    Load a package's references and compute the closure of its categories.

    Raises:
        ConfigurationError: if no package was given
        UnknownPackageError: if the package has no categories configured
        ReferenceNotFoundError: if the package has no reference.json
    """
    if not package:
        raise ConfigurationError(
            'No package name provided please provide a package name in -p.'
        )

    package_categories = CategoryLoader(categories_file).get_package(package)
    seed_names = package_categories.seed_names()

    index = ReferenceLoader(references_root).load(package, package_categories.root_package)

    missing = index.missing_categories(seed_names)
    if missing:
        print(f"⚠️  Categories not found in references, skipping: {', '.join(missing)}")

    seeds = index.find_seeds(seed_names)

    print(f"🔗 Collecting references from {len(seeds)} categories...")
    engine = ClosureEngine(EdgeTaxonomy(edge_kinds))
    result = engine.compute(index.nodes, seeds)

    print(f"  ✅ {result.metadata['total_nodes']} of {len(index.nodes)} nodes kept")
    if result.dangling:
        print(f"  ⚠️  {len(result.dangling)} dangling references ignored")

    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Clean references for the package given on the command line."""
    args = build_parser().parse_args(argv)
    package = args.package or Config.PACKAGE

    result = clean_references(
        package,
        references_root=args.references_root,
        edge_kinds=args.edge_kinds,
        categories_file=args.categories_file,
    )

    writer = ReferenceWriter(args.output_dir)
    try:
        path = writer.write(package, result.references)
    except PersistenceError as e:
        print(f"❌ An error has occurred {e}")
        return 1

    print(f"💾 Data successfully saved to {path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
