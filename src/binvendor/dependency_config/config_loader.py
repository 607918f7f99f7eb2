"""
Loading of dependency configurations from ``.json`` or ``.toml`` files.

Both formats share one layout: a top-level ``dependencies`` table whose keys
are dependency names.

    [dependencies.jq]
    version = "1.7.1"
    path = "vendor/jq"
    type = "uncompressed"
    uri_template = "https://github.com/jqlang/jq/releases/download/jq-{{ version }}/jq-{{ platform_os_name }}-{{ platform_cpu_name }}"
    file_name_template = "jq"
"""

import json
import os
import pathlib
from typing import Any, Dict, List, Union

try:
    import tomllib
except ModuleNotFoundError:
    # Python < 3.11
    import tomli as tomllib

from binvendor.binvendor_exceptions import ConfigurationError
from binvendor.dependency_models import DependencyConfig


def _read_config_file(config_path: pathlib.Path) -> Dict[str, Any]:
    suffix = config_path.suffix.lower()
    if suffix == ".json":
        with open(config_path, "r", encoding="utf-8") as f:
            return json.load(f)
    if suffix == ".toml":
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    raise ConfigurationError(
        f"Unsupported configuration file type '{suffix}' for {config_path}, expected .json or .toml"
    )


def configs_from_dict(config_dict: Dict[str, Any], base_path: Union[str, None] = None) -> List[DependencyConfig]:
    """
    Create DependencyConfigs from a dictionary with a ``dependencies`` table.

    Args:
        config_dict: Dictionary loaded from a configuration file
        base_path: Directory relative ``path`` and ``installation_directory``
            values are resolved against

    Returns:
        One DependencyConfig per entry, in file order

    Raises:
        ConfigurationError: If the layout or any entry is invalid
    """
    dependencies = config_dict.get("dependencies")
    if not isinstance(dependencies, dict):
        raise ConfigurationError("Configuration must contain a 'dependencies' table")

    configs = []
    for name, entry in dependencies.items():
        if not isinstance(entry, dict):
            raise ConfigurationError(f"Configuration for dependency '{name}' must be a table")

        data = dict(entry)
        data.setdefault("name", name)
        if base_path is not None:
            for key in ("path", "installation_directory"):
                value = data.get(key)
                if isinstance(value, str) and not os.path.isabs(value):
                    data[key] = os.path.join(base_path, value)

        configs.append(DependencyConfig.from_dict(data))

    return configs


def load_dependency_configs(config_path: Union[str, os.PathLike]) -> List[DependencyConfig]:
    """
    Load every dependency declared in ``config_path``.

    Relative paths inside the file are resolved against the file's directory.

    Raises:
        ConfigurationError: If the file type is unsupported or its content invalid
        FileNotFoundError: If the file does not exist
    """
    config_path = pathlib.Path(config_path)
    config_dict = _read_config_file(config_path)
    return configs_from_dict(config_dict, base_path=str(config_path.parent.resolve()))
