"""src/urilex/config.py

Parser configuration.
"""

from dataclasses import dataclass

PORT_POLICIES = ("strict", "ignore")


@dataclass(frozen=True)
class ParserOptions:
    """
    Parser configuration.

    Attributes:
        port_policy: What to do with a port literal that is not a decimal
            number in the 0-65535 range. ``"strict"`` raises ``InvalidPort``,
            ``"ignore"`` parses the URI without a port.
    """

    port_policy: str = "strict"

    def __post_init__(self) -> None:
        if self.port_policy not in PORT_POLICIES:
            raise ValueError(
                f"Unknown port policy {self.port_policy!r}, "
                f"expected one of {', '.join(PORT_POLICIES)}"
            )

    @property
    def strict_port(self) -> bool:
        """Whether a bad port literal fails the parse."""
        return self.port_policy == "strict"

    @classmethod
    def lenient(cls) -> "ParserOptions":
        """Create options that drop unparseable ports instead of failing."""
        return cls(port_policy="ignore")
