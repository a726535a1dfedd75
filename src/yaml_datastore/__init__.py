"""yaml_datastore - a directory of YAML files used as one cohesive datastore."""

from __future__ import annotations

# Core
from yaml_datastore.datastore import Datastore, open
from yaml_datastore.keypath import DEFAULT_EXTENSIONS, KeyPath
from yaml_datastore.candidates import Candidate, CandidateSequence
from yaml_datastore.resolver import Resolver
from yaml_datastore.documents import Documents

# Config
from yaml_datastore.config import Config, DatastoreSettings

# Errors
from yaml_datastore.errors import (
    ConfigError,
    ConfigNotFoundError,
    DataParseError,
    DatastoreError,
    DatastoreIOError,
    EmptyKeyVectorError,
    ErrorCodes,
    InvalidKeyPathError,
    KeyNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "open",
    "Datastore",
    "KeyPath",
    "Candidate",
    "CandidateSequence",
    "Resolver",
    "Documents",
    "DEFAULT_EXTENSIONS",
    # Config
    "Config",
    "DatastoreSettings",
    # Errors
    "ErrorCodes",
    "DatastoreError",
    "InvalidKeyPathError",
    "DatastoreIOError",
    "DataParseError",
    "KeyNotFoundError",
    "EmptyKeyVectorError",
    "ConfigError",
    "ConfigNotFoundError",
]
