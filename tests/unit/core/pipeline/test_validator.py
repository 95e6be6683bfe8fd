from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Type coercion (String to Bool/Int).
2. Default value injection.
3. Strict mode validation.
"""

import pytest

from huffcode.core.pipeline.validator import validate_config


def test_validate_none_returns_defaults() -> None:
    """Passing None should return the full default configuration."""
    cfg, warnings = validate_config(None)

    assert isinstance(cfg, dict)
    assert cfg["tree_source"] == "standard"
    assert cfg["fill_gaps"] is True
    assert cfg["display_limit"] == 1000

    assert len(warnings) > 0


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["tree_file_name"] == "treeBitRep.txt"
    assert cfg["save_tree"] is True
    assert cfg["encode_input_path"] == ""
    assert warnings == []


def test_validate_complete_config_passes_untouched(mock_config_dict) -> None:
    cfg, warnings = validate_config(mock_config_dict)

    assert cfg == mock_config_dict
    assert warnings == []


def test_validate_converts_strings_to_bools() -> None:
    raw = {
        "display_tree": "true",
        "save_tree": "False",
        "show_codes": "1",
        "fill_gaps": "no",
    }
    cfg, warnings = validate_config(raw, strict=False)

    assert cfg["display_tree"] is True
    assert cfg["save_tree"] is False
    assert cfg["show_codes"] is True
    assert cfg["fill_gaps"] is False
    assert len(warnings) == 4


def test_validate_display_limit_coercion() -> None:
    cfg, warnings = validate_config({"display_limit": "50"})
    assert cfg["display_limit"] == 50
    assert len(warnings) == 1

    cfg, warnings = validate_config({"display_limit": -3})
    assert cfg["display_limit"] == 1000
    assert len(warnings) == 1


def test_validate_tree_source_is_normalized() -> None:
    cfg, _ = validate_config({"tree_source": " TEST "})
    assert cfg["tree_source"] == "test"

    cfg, warnings = validate_config({"tree_source": "forest"})
    assert cfg["tree_source"] == "standard"
    assert "tree_source" in warnings[0]


def test_validate_blank_names_fall_back() -> None:
    cfg, _ = validate_config({"encoded_file_name": "   ", "decode_input_path": "  in.txt "})

    assert cfg["encoded_file_name"] == "encoded.txt"
    assert cfg["decode_input_path"] == "in.txt"


def test_validate_strict_mode_raises_errors() -> None:
    with pytest.raises(TypeError):
        validate_config({"save_tree": "yes"}, strict=True)

    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)

    with pytest.raises(ValueError):
        validate_config({"tree_source": "forest"}, strict=True)

    with pytest.raises(ValueError):
        validate_config({"display_limit": -1}, strict=True)
