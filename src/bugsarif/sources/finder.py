# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Locate analyzed source files under a list of configured source roots."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from bugsarif.core.exceptions import SourceNotFoundError

logger = logging.getLogger("bugsarif.sources.finder")


def base_uri(base: Path) -> str:
    """Return the ``file:`` URI of a source root, always ending with ``/``."""
    uri = base.resolve().as_uri()
    return uri if uri.endswith("/") else f"{uri}/"


@dataclass(frozen=True)
class SourceFile:
    """A source file found under one of the source roots."""

    path: Path
    base: Path

    @property
    def base_uri(self) -> str:
        return base_uri(self.base)

    @property
    def relative_uri(self) -> str:
        """POSIX path of the file relative to its source root.

        Symlinks are not followed, so a linked file keeps its path under the root.
        """
        return self.path.relative_to(self.base).as_posix()


class SourceFinder:
    """Resolve root-relative source paths against an ordered list of roots.

    The first root that contains the requested file wins, so more specific
    roots should be listed first.
    """

    def __init__(self, source_base_list: Iterable[str | Path] = ()) -> None:
        self._roots: list[Path] = []
        self.set_source_base_list(source_base_list)

    def set_source_base_list(self, source_base_list: Iterable[str | Path]) -> None:
        self._roots = [Path(root) for root in source_base_list]
        logger.debug("Source roots: %s", ", ".join(str(r) for r in self._roots) or "<none>")

    @property
    def source_base_list(self) -> list[Path]:
        return list(self._roots)

    def get_base(self, source_path: str) -> Path | None:
        """Return the first source root containing *source_path*, if any."""
        relative = _checked_relative(source_path)
        if relative is None:
            return None
        for root in self._roots:
            if (root / relative).is_file():
                return root
        return None

    def find_source_file(self, source_path: str) -> SourceFile:
        """Locate *source_path* under the configured roots.

        Raises:
            SourceNotFoundError: If no root contains the file.
        """
        base = self.get_base(source_path)
        if base is None:
            msg = f"Can't find source file {source_path}"
            raise SourceNotFoundError(msg)
        return SourceFile(path=base / source_path, base=base)


def _checked_relative(source_path: str) -> PurePosixPath | None:
    relative = PurePosixPath(source_path)
    if not source_path or relative.is_absolute() or ".." in relative.parts:
        return None
    return relative
