"""tests/unit/test_config.py"""

import pytest

from urilex.config import PORT_POLICIES, ParserOptions


def test_default_is_strict():
    """Verify that invalid ports fail the parse by default."""
    options = ParserOptions()
    assert options.port_policy == "strict"
    assert options.strict_port is True


def test_lenient():
    """Verify that lenient() builds the ignore policy."""
    options = ParserOptions.lenient()
    assert options.port_policy == "ignore"
    assert options.strict_port is False


@pytest.mark.parametrize("policy", PORT_POLICIES)
def test_known_policies(policy):
    """Verify that every known policy is accepted."""
    assert ParserOptions(port_policy=policy).port_policy == policy


def test_unknown_policy():
    """Verify that an unknown policy is rejected on construction."""
    with pytest.raises(ValueError) as exc_info:
        ParserOptions(port_policy="clamp")
    assert "clamp" in str(exc_info.value)
