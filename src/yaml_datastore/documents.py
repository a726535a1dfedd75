"""Reading, parsing, and decoding of datastore files."""

from __future__ import annotations

import errno
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import TypeAdapter
from yaml.constructor import ConstructorError

__all__ = ["Documents", "UniqueKeySafeLoader", "MISSING"]

T = TypeVar("T")

_MERGE_TAG = "tag:yaml.org,2002:merge"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class UniqueKeySafeLoader(yaml.SafeLoader):
    """SafeLoader that refuses mappings which repeat a key."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            # Merge keys (<<) are flattened by the base constructor and may be overridden.
            if key_node.tag == _MERGE_TAG:
                continue
            key = self.construct_object(key_node, deep=deep)
            try:
                duplicate = key in seen
            except TypeError:
                continue
            if duplicate:
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


class Documents:
    """File collaborators used by the resolver.

    Failures surface as ``OSError``, ``yaml.YAMLError`` or
    ``pydantic.ValidationError``; callers decide whether a failure is a soft
    miss or a hard error.

    Duplicate mapping keys are rejected by default. With
    ``reject_duplicate_keys=False`` PyYAML's behaviour applies and the last
    occurrence wins.
    """

    def __init__(self, reject_duplicate_keys: bool = True) -> None:
        self._reject_duplicate_keys = reject_duplicate_keys
        self._loader: type[yaml.SafeLoader] = UniqueKeySafeLoader if reject_duplicate_keys else yaml.SafeLoader

    @property
    def reject_duplicate_keys(self) -> bool:
        return self._reject_duplicate_keys

    def read(self, path: Path) -> bytes:
        """Read raw bytes from a file. A path the OS cannot accept raises OSError."""
        try:
            return Path(path).read_bytes()
        except ValueError as e:
            # e.g. embedded null byte
            raise OSError(errno.EINVAL, str(e), str(path)) from e

    def parse(self, data: bytes) -> Any:
        """Parse YAML bytes into a generic tree. An empty document parses to None."""
        try:
            return yaml.load(data, Loader=self._loader)
        except RecursionError as e:
            raise yaml.YAMLError("document is nested too deeply to parse") from e

    def decode(self, value: Any, type_: type[T] | Any = Any) -> T:
        """Convert a generic tree into ``type_``."""
        if type_ is Any:
            return value
        return TypeAdapter(type_).validate_python(value)

    @staticmethod
    def mapping_get(node: Any, key: str) -> Any:
        """Look up ``key`` in ``node``; MISSING if node is not a mapping or lacks the key."""
        if isinstance(node, dict) and key in node:
            return node[key]
        return MISSING
