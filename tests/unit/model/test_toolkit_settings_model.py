from functools import cmp_to_key

import pytest

from corekit.helper.toml_utils import load_toml_file
from corekit.model.toolkit_settings_model import ToolkitSettings, ToolkitSettingsError


# ============================================================================
# construction tests
# ============================================================================

def test_defaults():
    """Test the default settings."""
    s = ToolkitSettings()
    assert s.null_greater is False
    assert s.partition_size == 100
    assert s.at_end_if_miss is False


@pytest.mark.parametrize("size", [0, -5])
def test_rejects_partition_size_below_one(size):
    """Test partition_size < 1 is a settings error."""
    with pytest.raises(ToolkitSettingsError, match="partition_size"):
        ToolkitSettings(partition_size=size)


@pytest.mark.parametrize("kwargs", [
    {"partition_size": "10"},
    {"partition_size": True},
    {"null_greater": 1},
    {"at_end_if_miss": "yes"},
])
def test_rejects_wrong_types(kwargs):
    """Test values of the wrong type are settings errors."""
    with pytest.raises(ToolkitSettingsError):
        ToolkitSettings(**kwargs)


def test_wrong_type_message_names_declared_type():
    """Test the error names the type each field is declared with."""
    with pytest.raises(ToolkitSettingsError, match="null_greater must be bool, got int"):
        ToolkitSettings(null_greater=1)
    with pytest.raises(ToolkitSettingsError, match="partition_size must be int, got str"):
        ToolkitSettings(partition_size="10")


def test_is_frozen():
    """Test settings cannot be mutated."""
    s = ToolkitSettings()
    with pytest.raises(AttributeError):
        s.partition_size = 3


# ============================================================================
# mapping tests
# ============================================================================

def test_from_mapping_partial():
    """Test missing keys keep their defaults."""
    s = ToolkitSettings.from_mapping({"partition_size": 25})
    assert s == ToolkitSettings(partition_size=25)


def test_from_mapping_none():
    """Test None yields defaults."""
    assert ToolkitSettings.from_mapping(None) == ToolkitSettings()


def test_from_mapping_unknown_key():
    """Test unknown keys are rejected by name."""
    with pytest.raises(ToolkitSettingsError, match="bogus"):
        ToolkitSettings.from_mapping({"bogus": 1})


def test_to_mapping():
    """Test to_mapping lists every field."""
    s = ToolkitSettings(null_greater=True, partition_size=3)
    assert s.to_mapping() == {"null_greater": True, "partition_size": 3, "at_end_if_miss": False}


# ============================================================================
# file tests
# ============================================================================

def test_load_pyproject_table(write_toml):
    """Test [tool.corekit] is read from pyproject.toml."""
    path = write_toml("pyproject.toml", (
        "[project]\nname = \"demo\"\n\n"
        "[tool.corekit]\npartition_size = 5\nnull_greater = true\n"))
    s = ToolkitSettings.load_file(path)
    assert s.partition_size == 5
    assert s.null_greater is True
    assert s.at_end_if_miss is False


def test_load_pyproject_without_table(write_toml, caplog):
    """Test a pyproject.toml without [tool.corekit] gives defaults."""
    caplog.set_level("DEBUG", logger="corekit.model.toolkit_settings_model")
    path = write_toml("pyproject.toml", "[project]\nname = \"demo\"\n")
    assert ToolkitSettings.load_file(path) == ToolkitSettings()
    assert "[tool.corekit] not found" in caplog.text


def test_load_flat_file(write_toml):
    """Test any other file is read as a flat table."""
    path = write_toml("corekit.toml", "at_end_if_miss = true\n")
    assert ToolkitSettings.load_file(path).at_end_if_miss is True


def test_load_invalid_value(write_toml):
    """Test bad values in a file surface as settings errors."""
    path = write_toml("corekit.toml", "partition_size = 0\n")
    with pytest.raises(ToolkitSettingsError):
        ToolkitSettings.load_file(path)


def test_save_then_load(tmp_path):
    """Test save_file writes a flat table that load_file reads back."""
    s = ToolkitSettings(null_greater=True, partition_size=7, at_end_if_miss=True)
    path = s.save_file(tmp_path / "corekit.toml")
    assert load_toml_file(path) == s.to_mapping()
    assert ToolkitSettings.load_file(path) == s


def test_to_toml():
    """Test to_toml renders every field."""
    text = ToolkitSettings(partition_size=9).to_toml()
    assert "partition_size = 9" in text
    assert "null_greater = false" in text


# ============================================================================
# comparator tests
# ============================================================================

def test_null_safe_comparator_follows_setting():
    """Test None placement comes from null_greater."""
    items = [2, None, 1]
    first = ToolkitSettings().null_safe_comparator()
    last = ToolkitSettings(null_greater=True).null_safe_comparator()
    assert sorted(items, key=cmp_to_key(first)) == [None, 1, 2]
    assert sorted(items, key=cmp_to_key(last)) == [1, 2, None]


def test_indexed_comparator_follows_setting():
    """Test missing-key placement comes from at_end_if_miss."""
    cmp = ToolkitSettings(at_end_if_miss=True).indexed_comparator(lambda x: x, ["b", "a"])
    assert sorted(["a", "z", "b"], key=cmp_to_key(cmp)) == ["b", "a", "z"]
