"""
Unit tests for config/ module validation and serialization.
"""

import json

import pytest

from abstract_shapes.config import DEFAULT_ROLES, DemoConfig, ShapeFamily
from abstract_shapes.utils.exceptions import ConfigurationError, ShapeFactoryError


# ============================================================================
# SHAPE FAMILY TESTS
# ============================================================================


@pytest.mark.parametrize(
    "value, expected",
    [
        (ShapeFamily.ROBUST, ShapeFamily.ROBUST),
        ("robust", ShapeFamily.ROBUST),
        ("Simple", ShapeFamily.SIMPLE),
        ("  ROBUST ", ShapeFamily.ROBUST),
        (None, ShapeFamily.SIMPLE),
        ("", ShapeFamily.SIMPLE),
    ],
)
def test_family_resolve(value, expected):
    """Test family resolution from members, names and unset values."""
    assert ShapeFamily.resolve(value) is expected


@pytest.mark.parametrize("value", ["complex", 1, 3.5])
def test_family_resolve_invalid(value):
    """Test unknown families are rejected."""
    with pytest.raises(ConfigurationError):
        ShapeFamily.resolve(value)


def test_configuration_error_is_package_error():
    """Test ConfigurationError derives from the package base exception."""
    assert issubclass(ConfigurationError, ShapeFactoryError)


# ============================================================================
# DEMO CONFIG TESTS
# ============================================================================


def test_demo_config_defaults():
    """Test defaults select the simple family and curved/straight/curved."""
    config = DemoConfig()

    assert config.family is ShapeFamily.SIMPLE
    assert config.roles == ("curved", "straight", "curved")
    assert config.roles == DEFAULT_ROLES


def test_demo_config_accepts_family_name():
    """Test family names are resolved at construction."""
    assert DemoConfig(family="robust").family is ShapeFamily.ROBUST
    assert DemoConfig(family=None).family is ShapeFamily.SIMPLE


def test_demo_config_roles_become_tuple():
    """Test role lists are stored as a fixed tuple."""
    config = DemoConfig(roles=["straight", "straight"])

    assert config.roles == ("straight", "straight")


def test_demo_config_validation_invalid():
    """Test invalid roles and families are rejected."""
    with pytest.raises(ConfigurationError):
        DemoConfig(roles=())

    with pytest.raises(ConfigurationError):
        DemoConfig(roles=("curved", "pointy"))

    with pytest.raises(ConfigurationError):
        DemoConfig(family="fancy")


def test_demo_config_serialization_json():
    """Test DemoConfig JSON serialization roundtrip."""
    config = DemoConfig(family=ShapeFamily.ROBUST, roles=("straight", "curved"))

    config_dict = config.to_dict()
    assert config_dict == {"family": "robust", "roles": ["straight", "curved"]}

    restored = DemoConfig.from_dict(json.loads(json.dumps(config_dict)))

    assert restored == config
