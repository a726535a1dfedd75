"""Lazy, reversible enumeration of keypath interpretations."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import PurePath
from typing import overload

from yaml_datastore.keypath import DEFAULT_EXTENSIONS, KeyPath

__all__ = ["Candidate", "CandidateSequence"]


@dataclass(frozen=True)
class Candidate:
    """One interpretation of a keypath: a file path plus keys to apply inside it."""

    path_components: tuple[str, ...]
    residual_keys: tuple[str, ...]
    extension: str

    @property
    def path(self) -> PurePath:
        """Relative file path with the extension appended to the last segment."""
        *parents, name = self.path_components
        if self.extension:
            name = f"{name}.{self.extension}"
        return PurePath(*parents, name)


class CandidateSequence(Sequence[Candidate]):
    """Every (path, residual keys) interpretation of a keypath, in precedence order.

    Forward order starts with the whole keypath as a nested file path and moves
    to progressively shorter path prefixes, trying every extension for a prefix
    before moving on. For ``a.b.c`` and ``("yaml", "yml")``::

        a/b/c.yaml  []
        a/b/c.yml   []
        a/b.yaml    [c]
        a/b.yml     [c]
        a.yaml      [b, c]
        a.yml       [b, c]

    ``reversed()`` yields the mirror order, preferring in-file keys over nested
    paths. Candidates are built on demand from their index, so stopping early
    never pays for the rest of the sequence.
    """

    def __init__(self, keypath: KeyPath, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> None:
        self._components = keypath.components
        self._extensions = tuple(ext.lstrip(".") for ext in extensions)

    @property
    def extensions(self) -> tuple[str, ...]:
        return self._extensions

    def __len__(self) -> int:
        return len(self._components) * len(self._extensions)

    @overload
    def __getitem__(self, index: int) -> Candidate: ...

    @overload
    def __getitem__(self, index: slice) -> list[Candidate]: ...

    def __getitem__(self, index: int | slice) -> Candidate | list[Candidate]:
        if isinstance(index, slice):
            return [self._build(i) for i in range(*index.indices(len(self)))]
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("candidate index out of range")
        return self._build(index)

    def __iter__(self) -> Iterator[Candidate]:
        for i in range(len(self)):
            yield self._build(i)

    def __reversed__(self) -> Iterator[Candidate]:
        for i in reversed(range(len(self))):
            yield self._build(i)

    def _build(self, index: int) -> Candidate:
        prefix_len = len(self._components) - index // len(self._extensions)
        return Candidate(
            path_components=self._components[:prefix_len],
            residual_keys=self._components[prefix_len:],
            extension=self._extensions[index % len(self._extensions)],
        )

    def __repr__(self) -> str:
        return f"CandidateSequence({'.'.join(self._components)!r}, extensions={self._extensions!r})"
