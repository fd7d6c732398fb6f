"""Configuration helpers for the path builders."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class PathConfig:
    # Prepend a supplied starting point to the result of the point builder.
    # The line builder never emits the start.
    include_starting_point: bool = False


_PATH_CONFIG = PathConfig()


def get_path_config() -> PathConfig:
    return copy.deepcopy(_PATH_CONFIG)


def set_path_config(config: PathConfig) -> None:
    global _PATH_CONFIG
    _PATH_CONFIG = copy.deepcopy(config)


def reset_path_config() -> None:
    set_path_config(PathConfig())
