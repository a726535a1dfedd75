"""Datastore handle: keypath lookups and explicit-path loads."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import NonNegativeInt, ValidationError

from yaml_datastore.config import Config, DatastoreSettings
from yaml_datastore.documents import MISSING, Documents
from yaml_datastore.errors import (
    DataParseError,
    DatastoreIOError,
    EmptyKeyVectorError,
    KeyNotFoundError,
)
from yaml_datastore.resolver import Resolver

__all__ = ["Datastore", "open"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Datastore:
    """A directory of YAML files used as one datastore.

    :meth:`get` searches for a keypath across files and keys. The ``get_with_*``
    methods load a file the caller names explicitly; they never search, and
    every failure is reported.
    """

    def __init__(self, root: str | Path, config: Config | None = None) -> None:
        self._root = Path(root)
        self._settings: DatastoreSettings = (config or Config()).datastore_settings()
        self._documents = Documents(reject_duplicate_keys=self._settings.reject_duplicate_keys)
        self._resolver = Resolver(self._root, self._documents)

    @property
    def root(self) -> Path:
        """Directory all paths and keypaths are relative to."""
        return self._root

    @property
    def extensions(self) -> tuple[str, ...]:
        """Default file extensions tried for each candidate path."""
        return self._settings.extensions

    @property
    def settings(self) -> DatastoreSettings:
        return self._settings

    def get(
        self,
        keypath: str,
        type_: type[T] | Any = Any,
        *,
        extensions: Sequence[str] | None = None,
        reverse: bool | None = None,
    ) -> T:
        """Look up a keypath such as ``a.b.c``, searching files and keys.

        By default the longest file path wins: ``a/b/c.yaml`` is tried before
        key ``c`` in ``a/b.yaml``, which is tried before keys ``b.c`` in
        ``a.yaml``. ``reverse=True`` inverts that order.
        """
        return self._resolver.resolve(
            keypath,
            type_,
            extensions=self._settings.extensions if extensions is None else extensions,
            reverse=self._settings.reverse if reverse is None else reverse,
        )

    def get_with_path(self, path: str | Path, type_: type[T] | Any = Any) -> T:
        """Load the whole file at ``path`` (relative to the root) as ``type_``."""
        file_path = self._root / path
        document = self._load(file_path)
        return self._decode(document, type_, file_path)

    def get_with_key(self, path: str | Path, key: str, type_: type[T] | Any = Any) -> T:
        """Load the value under ``key`` in the file at ``path``."""
        return self.get_with_key_vec(path, [key], type_)

    def get_with_key_vec(self, path: str | Path, keys: Sequence[str] | str, type_: type[T] | Any = Any) -> T:
        """Load the value under a chain of nested ``keys`` in the file at ``path``.

        A single string is one key, not a chain of characters.
        """
        if isinstance(keys, str):
            keys = [keys]
        file_path = self._root / path
        if not keys:
            raise EmptyKeyVectorError(path=str(file_path))

        document = self._load(file_path)
        if not isinstance(document, dict):
            raise DataParseError(
                path=str(file_path),
                reason=f"expected a mapping, got {type(document).__name__}",
            )

        node: Any = document
        for depth, key in enumerate(keys):
            node = self._documents.mapping_get(node, key)
            if node is MISSING:
                raise KeyNotFoundError(key=".".join(keys[: depth + 1]), path=str(file_path))
        return self._decode(node, type_, file_path, list(keys))

    def get_int(self, keypath: str, **kwargs: Any) -> int:
        return self.get(keypath, int, **kwargs)

    def get_uint(self, keypath: str, **kwargs: Any) -> int:
        return self.get(keypath, NonNegativeInt, **kwargs)

    def get_float(self, keypath: str, **kwargs: Any) -> float:
        return self.get(keypath, float, **kwargs)

    def get_bool(self, keypath: str, **kwargs: Any) -> bool:
        return self.get(keypath, bool, **kwargs)

    def get_str(self, keypath: str, **kwargs: Any) -> str:
        return self.get(keypath, str, **kwargs)

    def _load(self, file_path: Path) -> Any:
        try:
            data = self._documents.read(file_path)
        except OSError as e:
            raise DatastoreIOError(path=str(file_path), reason=e.strerror or str(e), cause=e) from e

        try:
            return self._documents.parse(data)
        except yaml.YAMLError as e:
            raise DataParseError(path=str(file_path), reason=f"invalid YAML: {e}", cause=e) from e

    def _decode(self, value: Any, type_: Any, file_path: Path, keys: list[str] | None = None) -> Any:
        try:
            return self._documents.decode(value, type_)
        except ValidationError as e:
            raise DataParseError(path=str(file_path), reason=str(e), keys=keys, cause=e) from e

    def __repr__(self) -> str:
        return f"Datastore(root={str(self._root)!r})"


def open(root: str | Path, config: Config | None = None) -> Datastore:  # noqa: A001
    """Open a datastore rooted at ``root``. Performs no I/O."""
    logger.debug("Opening datastore at %s", root)
    return Datastore(root, config)
