"""Keypaths: dotted keys that may name directories, files, or keys inside a file.

A keypath has the form ``a.b.c.d``. Each component is trimmed of surrounding
whitespace, so `` a . b `` parses as ``a.b``. Components may not be empty and
may not contain ``/``. Invalid examples::

    contains/slash
    empty.component..in.middle
    whitespace.component. .in.middle
    .empty.component.at.beginning
    empty.component.at.end.

Use :meth:`KeyPath.candidates` to enumerate every interpretation of a keypath
as a file path plus residual in-file keys.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from yaml_datastore.errors import InvalidKeyPathError

if TYPE_CHECKING:
    from yaml_datastore.candidates import CandidateSequence

__all__ = ["KeyPath", "DELIMITER", "INVALID_CHARACTERS", "DEFAULT_EXTENSIONS"]

DELIMITER = "."

INVALID_CHARACTERS = (".", "/")

DEFAULT_EXTENSIONS: tuple[str, ...] = ("yaml", "yml")


def _validate_component(component: str, raw: Any) -> str:
    trimmed = component.strip()
    if not trimmed or any(ch in trimmed for ch in INVALID_CHARACTERS):
        raise InvalidKeyPathError(keypath=raw)
    return trimmed


@dataclass(frozen=True)
class KeyPath:
    """A validated keypath. Construct with :meth:`parse`."""

    components: tuple[str, ...]

    @classmethod
    def parse(cls, raw: str) -> KeyPath:
        """Split, trim, and validate a raw keypath string.

        Raises:
            InvalidKeyPathError: If any component is empty or contains a slash.
        """
        if not isinstance(raw, str):
            raise InvalidKeyPathError(keypath=raw)
        components = tuple(_validate_component(part, raw) for part in raw.split(DELIMITER))
        return cls(components=components)

    def candidates(self, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> CandidateSequence:
        """Return every (path, residual keys) interpretation, longest path first."""
        from yaml_datastore.candidates import CandidateSequence

        return CandidateSequence(self, extensions)

    def __len__(self) -> int:
        return len(self.components)

    def __str__(self) -> str:
        return DELIMITER.join(self.components)
