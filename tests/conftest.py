from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and small trees.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict(tmp_path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'huffcode.domain.config', with the
    output directory pointing at a temporary folder.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        # Tree Source
        "tree_source": "standard",
        "tree_input_path": "",
        "tree_bits_path": "",
        "fill_gaps": True,

        # Inputs
        "encode_input_path": "",
        "decode_input_path": "",

        # Outputs
        "output_dir": str(tmp_path / "out"),
        "tree_file_name": "treeBitRep.txt",
        "encoded_file_name": "encoded.txt",
        "decoded_file_name": "decoded.txt",
        "packed_file_name": "encoded.bin",
        "save_tree": True,
        "pack_encoded": False,

        # Display
        "display_tree": False,
        "display_all_bits": True,
        "show_codes": False,
        "display_limit": 1000,
    }


@pytest.fixture
def abc_tree():
    """
    Tree built by hand for the table {a: 3, b: 1, c: 1}.

    Codes: b='00', c='01', a='1'.
    """
    from huffcode.domain.tree_models import Internal, Leaf

    return Internal(Internal(Leaf("b", 1), Leaf("c", 1)), Leaf("a", 3))
