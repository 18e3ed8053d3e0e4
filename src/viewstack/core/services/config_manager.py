"""
config_manager.py
-----------------
Configuration loader for viewstack settings.

Features:
- Supports .json and .py config files
- Builds a file index of the search directories once for O(1) lookups
- Recursively merges defaults
- Ignores '_notes' keys for human-readable configs
- Applies loaded sections onto the settings classes
"""

import os
import json
import importlib.util

from viewstack.core.debug.debug_logger import DebugLogger, LoggerConfig
from viewstack.core.runtime import settings


# ===========================================================
# Configuration
# ===========================================================

SEARCH_DIRS = [
    ".",
    "config",
]

# Config section name -> settings class it overrides
SETTINGS_SECTIONS = {
    "display": settings.Display,
    "timing": settings.Timing,
    "transition": settings.Transition,
    "input": settings.Input,
    "layers": settings.Layers,
    "loading": settings.Loading,
    "assets": settings.Assets,
    "logger": LoggerConfig,
}

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Filename or full path (.json or .py)
        default_dict: Default fallback config
        strict: If True, raise exception on missing file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    if os.path.isabs(filename) and os.path.exists(filename):
        path = filename
    else:
        path = _resolve_search_path(filename)

    try:
        if path.endswith(".py"):
            data = _load_py_module(path)
        else:
            data = _load_json(path)

        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, FileNotFoundError, IOError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="config")
        return default_dict.copy()


def apply_settings(config):
    """
    Copy known config sections onto the settings classes.

    Args:
        config: Dict of {section: {KEY: value}}. Keys are matched case-insensitively.

    Returns:
        int: Number of settings overridden
    """
    applied = 0

    for section, values in config.items():
        target = SETTINGS_SECTIONS.get(section.lower())
        if target is None or not isinstance(values, dict):
            DebugLogger.warn(f"Unknown config section '{section}'", category="config")
            continue

        for key, value in values.items():
            attr = key.upper()
            if not hasattr(target, attr):
                DebugLogger.warn(f"Unknown setting '{section}.{key}'", category="config")
                continue

            current = getattr(target, attr)
            if isinstance(current, dict) and isinstance(value, dict):
                value = _merge_dicts(current, value)
            elif isinstance(current, tuple) and isinstance(value, list):
                value = tuple(value)

            setattr(target, attr, value)
            applied += 1

    return applied


def configure(filename="viewstack.json", strict=False):
    """Load a config file and apply it to the settings classes."""
    config = load_config(filename, strict=strict)
    applied = apply_settings(config)
    DebugLogger.system(f"Applied {applied} settings from {filename}", category="config")
    return config


def build_file_index():
    """Scan config directories and cache all file paths."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for root, _, files in os.walk(directory):
            for file in files:
                if file.endswith((".json", ".py")) and file not in _FILE_INDEX:
                    _FILE_INDEX[file] = os.path.join(root, file)

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="config")


def rebuild_file_index():
    """Clear and rebuild index."""
    global _FILE_INDEX
    _FILE_INDEX = None
    build_file_index()


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    if _FILE_INDEX is None:
        build_file_index()

    filename = filename.replace("\\", "/").lstrip("/")

    if filename in _FILE_INDEX:
        return _FILE_INDEX[filename]

    for ext in (".json", ".py"):
        key = filename + ext
        if key in _FILE_INDEX:
            return _FILE_INDEX[key]

    # Relative paths outside the index are tried as given
    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="config")
    return data


def _load_py_module(path):
    """Load Python config file and return DEFAULT_CONFIG if present."""
    try:
        spec = importlib.util.spec_from_file_location("viewstack_config", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        DebugLogger.system(f"Loaded {os.path.basename(path)} (Python)", category="config")
        return getattr(module, "DEFAULT_CONFIG", {})
    except (ImportError, AttributeError, SyntaxError) as e:
        DebugLogger.warn(f"Failed to load Python config {path}: {e}", category="config")
        return {}


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = default.copy()
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
