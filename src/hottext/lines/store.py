from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Set

from hottext.lines import loaders
from hottext.lines.loaders import LinePairs, PathLike
from hottext.lines.rng import RandomSource, default_random_source


class VariantStore:
    """
    Maps keys to sets of interchangeable lines and picks one uniformly at random.

    Entries only grow: there is no removal. The store does no locking; callers
    sharing it (and its random source) across threads must guard it themselves.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.rng = rng if rng is not None else default_random_source()
        self.logger = logger or logging.getLogger(__name__)
        self._line_pairs: Dict[str, Set[str]] = {}

    # ----------------------------
    # Mutation
    # ----------------------------
    def insert(self, key: str, line: str) -> None:
        lines = self._line_pairs.get(key)
        if lines is None:
            self._line_pairs[key] = {line}
        else:
            lines.add(line)

    def extend(self, key: str, lines: Iterable[str]) -> None:
        if isinstance(lines, str):
            raise TypeError(f"extend() expects a collection of lines for {key!r}, got a single str; use insert()")
        new_lines = set(lines)
        if not new_lines:
            # never create a key with nothing to pick from
            self.logger.debug(f"[VariantStore] extend skipped empty set | key={key!r}")
            return

        existing = self._line_pairs.get(key)
        if existing is None:
            self._line_pairs[key] = new_lines
        else:
            existing |= new_lines

    def bulk_load(self, line_pairs: Mapping[str, Iterable[str]]) -> None:
        for key, lines in line_pairs.items():
            self.extend(key, lines)

        self.logger.debug(
            f"[VariantStore] bulk_load merged | "
            f"incoming_keys={len(line_pairs)} | total_keys={len(self._line_pairs)}"
        )

    # ----------------------------
    # Loader helpers
    # ----------------------------
    def load(self, loader: Callable[..., LinePairs], *args: Any, **kwargs: Any) -> None:
        """Merge whatever the loader returns; loader errors propagate untouched."""
        self.bulk_load(loader(*args, **kwargs))

    def load_json(self, path: PathLike) -> None:
        self.load(loaders.load_json, path)

    def load_toml(self, path: PathLike) -> None:
        self.load(loaders.load_toml, path)

    def with_load(self, loader: Callable[..., LinePairs], *args: Any, **kwargs: Any) -> "VariantStore":
        self.load(loader, *args, **kwargs)
        return self

    def with_load_json(self, path: PathLike) -> "VariantStore":
        self.load_json(path)
        return self

    def with_load_toml(self, path: PathLike) -> "VariantStore":
        self.load_toml(path)
        return self

    # ----------------------------
    # Retrieval
    # ----------------------------
    def get_one(self, key: str) -> Optional[str]:
        lines = self._line_pairs.get(key)
        if not lines:
            return None

        # sorted so a seeded source picks the same line regardless of set order
        candidates = sorted(lines)
        picked = candidates[self.rng.choose_index(len(candidates))]

        self.logger.debug(f"[VariantStore] get_one | key={key!r} | variants={len(candidates)}")
        return picked

    def get_all(self, key: str) -> Optional[Set[str]]:
        lines = self._line_pairs.get(key)
        if lines is None:
            return None
        return set(lines)

    def keys(self) -> Set[str]:
        return set(self._line_pairs)

    def __contains__(self, key: object) -> bool:
        return key in self._line_pairs

    def __len__(self) -> int:
        return len(self._line_pairs)
