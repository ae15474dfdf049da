# yaks_config/config/config_loader.py

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from yaks_config.utils.errors import ConfigParseError, ConfigReadError
from yaks_config.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = "yaks-config.yaml"

# Document keys. Namespace settings sit directly under "config",
# next to "recursive", with no "namespace:" mapping of their own.
CONFIG_KEY = "config"
RECURSIVE_KEY = "recursive"
NAME_KEY = "name"
TEMPORARY_KEY = "temporary"
AUTO_REMOVE_KEY = "autoremove"


@dataclass
class NamespaceConfig:
    """Name and lifecycle settings of the namespace tests run in."""

    name: str = ""
    temporary: bool = False
    auto_remove: bool = True


@dataclass
class Config:
    recursive: bool = True
    namespace: NamespaceConfig = field(default_factory=NamespaceConfig)


@dataclass
class RunConfig:
    """Top-level envelope, mirrors the ``config`` key of the document."""

    config: Config = field(default_factory=Config)

    def to_dict(self) -> dict[str, Any]:
        """Render the record in the on-disk document shape."""
        namespace = self.config.namespace
        return {
            CONFIG_KEY: {
                RECURSIVE_KEY: self.config.recursive,
                NAME_KEY: namespace.name,
                TEMPORARY_KEY: namespace.temporary,
                AUTO_REMOVE_KEY: namespace.auto_remove,
            }
        }


def config_file_for(directory: str | os.PathLike[str]) -> Path:
    """Return the conventional config file path inside a test directory."""
    return Path(directory) / DEFAULT_CONFIG_FILE


def load_defaults() -> RunConfig:
    """Build a fresh run configuration holding the fixed defaults."""
    return RunConfig(
        config=Config(
            recursive=True,
            namespace=NamespaceConfig(name="", temporary=False, auto_remove=True),
        )
    )


def load_config(path: str | os.PathLike[str]) -> RunConfig:
    """Load the run configuration, overlaying the YAML file at ``path`` on the defaults.

    Args:
        path: Path to the configuration file. It does not have to exist.

    Returns:
        RunConfig: The defaults when the file is absent, otherwise the defaults
        with every field present in the file overwritten.

    Raises:
        ConfigReadError: The file exists but cannot be read (permission denied,
            path is a directory, I/O error).
        ConfigParseError: The content is not valid YAML or does not fit the
            run configuration structure.
    """
    config_path = str(path)
    run_config = load_defaults()

    try:
        data = Path(config_path).read_bytes()
    except FileNotFoundError:
        logger.debug(
            "Configuration file not found at path: %s; using defaults.",
            config_path,
            extra={"config_path": config_path},
        )
        return run_config
    except OSError as e:
        raise ConfigReadError(config_path, e) from e

    # Compose first: the node tree keeps each scalar's source text
    try:
        loader = yaml.SafeLoader(data)
        try:
            node = loader.get_single_node()
            document = loader.construct_document(node) if node is not None else None
        finally:
            loader.dispose()
    except yaml.YAMLError as e:
        raise ConfigParseError(
            f"Error parsing configuration YAML at {config_path}: {e}", config_path
        ) from e

    _apply_document(run_config, document, _section_scalars(node), config_path)
    logger.info(
        "Configuration loaded successfully from %s",
        config_path,
        extra={"config_path": config_path},
    )
    return run_config


class ConfigLoader:
    """
    Loads run configurations.

    Holds no state: every call reads the file again and returns a new record,
    so callers that want a process-wide configuration keep the result themselves.
    """

    @classmethod
    def load_defaults(cls) -> RunConfig:
        return load_defaults()

    @classmethod
    def load_config(cls, config_path: str | os.PathLike[str]) -> RunConfig:
        return load_config(config_path)


# ---------------------------------------------------------------------------
# Document decoding
# ---------------------------------------------------------------------------


_STR_TAG = "tag:yaml.org,2002:str"

# YAML 1.1 boolean spellings that PyYAML's resolver leaves as strings
_SHORT_BOOLS = {"y": True, "Y": True, "n": False, "N": False}


def _section_scalars(root: yaml.Node | None) -> dict[str, yaml.ScalarNode]:
    """Map each scalar key of the ``config`` section to its value node.

    The nodes keep the source text of each value, which the constructed
    document loses (``0x1f`` becomes ``31``).
    """
    section = _mapping_value(root, CONFIG_KEY)
    if not isinstance(section, yaml.MappingNode):
        return {}
    return {
        key_node.value: value_node
        for key_node, value_node in section.value
        if _is_str_scalar(key_node) and isinstance(value_node, yaml.ScalarNode)
    }


def _mapping_value(node: yaml.Node | None, key: str) -> yaml.Node | None:
    found = None
    if isinstance(node, yaml.MappingNode):
        for key_node, value_node in node.value:
            if _is_str_scalar(key_node) and key_node.value == key:
                found = value_node
    return found


def _is_str_scalar(node: yaml.Node) -> bool:
    return isinstance(node, yaml.ScalarNode) and node.tag == _STR_TAG


def _apply_document(
    run_config: RunConfig,
    document: Any,
    scalars: dict[str, yaml.ScalarNode],
    config_path: str,
) -> None:
    """Overwrite the fields of ``run_config`` that ``document`` sets."""
    if document is None:
        # Empty file or comments only
        return
    if not isinstance(document, dict):
        raise _type_mismatch(config_path, "<document>", "a mapping", document)

    if CONFIG_KEY not in document:
        return
    section = document[CONFIG_KEY]
    if section is None:
        # An explicit null clears the whole section to zero values
        run_config.config = Config(
            recursive=False,
            namespace=NamespaceConfig(name="", temporary=False, auto_remove=False),
        )
        return
    if not isinstance(section, dict):
        raise _type_mismatch(config_path, CONFIG_KEY, "a mapping", section)

    def decode_bool(key: str) -> bool:
        return _decode_bool(section[key], scalars.get(key), key, config_path)

    config = run_config.config
    namespace = config.namespace
    if RECURSIVE_KEY in section:
        config.recursive = decode_bool(RECURSIVE_KEY)
    if NAME_KEY in section:
        namespace.name = _decode_str(
            section[NAME_KEY], scalars.get(NAME_KEY), NAME_KEY, config_path
        )
    if TEMPORARY_KEY in section:
        namespace.temporary = decode_bool(TEMPORARY_KEY)
    if AUTO_REMOVE_KEY in section:
        namespace.auto_remove = decode_bool(AUTO_REMOVE_KEY)


def _decode_bool(
    value: Any, node: yaml.ScalarNode | None, key: str, config_path: str
) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    # Only plain scalars; a quoted "y" stays a string
    if node is not None and node.style is None and node.value in _SHORT_BOOLS:
        return _SHORT_BOOLS[node.value]
    raise _type_mismatch(config_path, f"{CONFIG_KEY}.{key}", "a boolean", value)


def _decode_str(
    value: Any, node: yaml.ScalarNode | None, key: str, config_path: str
) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list, set)):
        raise _type_mismatch(config_path, f"{CONFIG_KEY}.{key}", "a string", value)
    if node is not None:
        return node.value
    return str(value)


def _type_mismatch(config_path: str, key: str, expected: str, value: Any) -> ConfigParseError:
    return ConfigParseError(
        f"Error parsing configuration YAML at {config_path}: "
        f"{key} must be {expected}, got {type(value).__name__} {value!r}",
        config_path,
    )
