from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the last session settings
using JSON in the user data directory. Falls back to defaults when the
stored file is missing or corrupted.
"""

import json
import logging
import os
from typing import Any, Dict

from huffcode.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_DECODED_FILE_NAME,
    DEFAULT_DISPLAY_LIMIT,
    DEFAULT_ENCODED_FILE_NAME,
    DEFAULT_PACKED_FILE_NAME,
    DEFAULT_TREE_FILE_NAME,
    TREE_SOURCE_STANDARD,
)
from huffcode.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).
    This dictionary drives the behavior of the Pipeline.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Tree Source
        "tree_source": TREE_SOURCE_STANDARD,
        "tree_input_path": "",
        "tree_bits_path": "",
        "fill_gaps": True,

        # Inputs
        "encode_input_path": "",
        "decode_input_path": "",

        # Outputs
        "output_dir": os.getcwd(),
        "tree_file_name": DEFAULT_TREE_FILE_NAME,
        "encoded_file_name": DEFAULT_ENCODED_FILE_NAME,
        "decoded_file_name": DEFAULT_DECODED_FILE_NAME,
        "packed_file_name": DEFAULT_PACKED_FILE_NAME,
        "save_tree": True,
        "pack_encoded": False,

        # Display
        "display_tree": False,
        "display_all_bits": True,
        "show_codes": False,
        "display_limit": DEFAULT_DISPLAY_LIMIT,
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    state = get_default_app_state()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    # Merge with defaults to ensure new keys exist
    if isinstance(data.get("last_session"), dict):
        state["last_session"].update(data["last_session"])

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Retrieve the active configuration (Last Session) directly.
    """
    state = load_app_state()
    defaults = get_default_config()
    defaults.update(state.get("last_session", {}))
    return defaults


def save_config(config: Dict[str, Any]) -> None:
    """
    Save the provided config as the 'last_session'.
    """
    state = load_app_state()
    state["last_session"] = config
    save_app_state(state)
