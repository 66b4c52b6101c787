# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Load bug pattern catalogs from YAML.

A catalog is a mapping with a ``patterns`` list::

    patterns:
      - type: NP_NULL_ON_SOME_PATH
        category: CORRECTNESS
        short_description: Possible null pointer dereference
        long_description: Possible null pointer dereference of {2.givenClass} in {1}
        url: https://example.com/bugDescriptions.html
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from bugsarif.core.exceptions import PatternCatalogError
from bugsarif.models.bug import BugPattern

logger = logging.getLogger("bugsarif.patterns.yaml_loader")


def load_patterns_from_file(path: str | Path) -> list[BugPattern]:
    """Parse one catalog file.

    Raises:
        PatternCatalogError: If the file is unreadable, is not valid YAML, or
            an entry does not describe a bug pattern.
    """
    filepath = Path(path)
    try:
        raw_text = filepath.read_text(encoding="utf-8")
    except OSError as exc:
        raise PatternCatalogError(f"Cannot read pattern catalog {filepath}: {exc}") from exc

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise PatternCatalogError(f"Invalid YAML syntax in {filepath.name}: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("patterns"), list):
        msg = f"Expected a mapping with a 'patterns' list in {filepath.name}"
        raise PatternCatalogError(msg)

    patterns: list[BugPattern] = []
    for position, entry in enumerate(data["patterns"]):
        if not isinstance(entry, dict):
            msg = f"Pattern #{position} in {filepath.name} is not a mapping"
            raise PatternCatalogError(msg)
        try:
            patterns.append(BugPattern(**entry))
        except ValidationError as exc:
            raise PatternCatalogError(
                f"Schema validation failed for pattern #{position} in {filepath.name}: {exc}"
            ) from exc

    logger.debug("Loaded %d bug patterns from %s", len(patterns), filepath.name)
    return patterns


def load_patterns_from_directory(catalog_dir: str | Path) -> list[BugPattern]:
    """Load every ``.yml`` / ``.yaml`` catalog in *catalog_dir*.

    Broken catalogs are logged and skipped.  A pattern type defined in more
    than one file keeps the definition from the file loaded last.
    """
    catalog_path = Path(catalog_dir)

    if not catalog_path.is_dir():
        logger.warning("Pattern catalog directory does not exist: %s", catalog_path)
        return []

    yaml_files = sorted([*catalog_path.glob("*.yml"), *catalog_path.glob("*.yaml")])
    if not yaml_files:
        logger.info("No YAML pattern catalogs found in %s", catalog_path)
        return []

    by_type: dict[str, BugPattern] = {}
    for filepath in yaml_files:
        try:
            patterns = load_patterns_from_file(filepath)
        except PatternCatalogError as exc:
            logger.warning("Skipping pattern catalog %s: %s", filepath.name, exc)
            continue
        for pattern in patterns:
            by_type[pattern.type] = pattern

    logger.info("Loaded %d bug patterns from %s", len(by_type), catalog_path)
    return list(by_type.values())
