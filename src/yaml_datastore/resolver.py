"""Keypath resolution against a directory of YAML files."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import ValidationError

from yaml_datastore.candidates import Candidate
from yaml_datastore.documents import MISSING, Documents
from yaml_datastore.errors import DataParseError, KeyNotFoundError
from yaml_datastore.keypath import DEFAULT_EXTENSIONS, KeyPath

__all__ = ["Resolver"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _SoftMiss(Exception):
    """A candidate did not match; the search moves on to the next one."""


class Resolver:
    """Finds the first candidate interpretation of a keypath that yields a value.

    Candidates are tried longest path first. A missing or unreadable file, a
    document that does not parse, or a key chain that does not lead anywhere
    only means the next candidate is tried. The one hard failure during the
    search is a value found at the end of a key chain that cannot be decoded
    into the requested type.
    """

    def __init__(self, root: str | Path, documents: Documents | None = None) -> None:
        self._root = Path(root)
        self._documents = documents or Documents()

    @property
    def root(self) -> Path:
        return self._root

    def resolve(
        self,
        raw_keypath: str,
        type_: type[T] | Any = Any,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        reverse: bool = False,
    ) -> T:
        """Resolve a raw keypath to a value of ``type_``.

        Raises:
            InvalidKeyPathError: The keypath is malformed.
            DataParseError: The value at the end of a matched key chain does not fit ``type_``.
            KeyNotFoundError: No candidate matched.
        """
        keypath = KeyPath.parse(raw_keypath)
        candidates = keypath.candidates(extensions)
        ordered = reversed(candidates) if reverse else iter(candidates)

        for candidate in ordered:
            try:
                value = self._try_candidate(candidate, type_)
            except _SoftMiss as miss:
                logger.debug("Keypath '%s': skipping %s (%s)", keypath, candidate.path, miss)
                continue
            logger.debug("Keypath '%s' resolved to %s %s", keypath, candidate.path, list(candidate.residual_keys))
            return value

        raise KeyNotFoundError(key=str(keypath))

    def _try_candidate(self, candidate: Candidate, type_: Any) -> Any:
        file_path = self._root / candidate.path
        try:
            data = self._documents.read(file_path)
        except OSError as e:
            raise _SoftMiss(f"unreadable: {e.strerror or e}") from e

        try:
            document = self._documents.parse(data)
        except yaml.YAMLError as e:
            raise _SoftMiss("invalid YAML") from e

        if not candidate.residual_keys:
            try:
                return self._documents.decode(document, type_)
            except ValidationError as e:
                raise _SoftMiss("document does not match requested type") from e

        node = document
        for key in candidate.residual_keys:
            node = self._documents.mapping_get(node, key)
            if node is MISSING:
                raise _SoftMiss(f"no key '{key}'")

        try:
            return self._documents.decode(node, type_)
        except ValidationError as e:
            raise DataParseError(
                path=str(file_path),
                reason=str(e),
                keys=list(candidate.residual_keys),
                cause=e,
            ) from e
