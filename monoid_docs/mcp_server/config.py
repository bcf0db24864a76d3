"""Configuration for the MCP protocol engine."""

PROTOCOL_VERSION = "2024-11-05"

# Default configuration
DEFAULT_CONFIG = {
    "server_name": "monoid-docs",
    "server_version": "1.0.0",
    "search_limit": 10,
}


class Config:
    """MCP server identity and tool limits."""

    protocol_version = PROTOCOL_VERSION

    def __init__(self, **overrides: str | int):
        """Initialize configuration with optional overrides."""
        self.server_name = overrides.get("server_name", DEFAULT_CONFIG["server_name"])
        self.server_version = overrides.get(
            "server_version", DEFAULT_CONFIG["server_version"]
        )
        self.search_limit = overrides.get(
            "search_limit", DEFAULT_CONFIG["search_limit"]
        )

    @classmethod
    def from_server_config(cls, server_config) -> "Config":
        """Build from the application-wide ServerConfig."""
        return cls(
            server_name=server_config.server_name,
            server_version=server_config.server_version,
            search_limit=server_config.search_limit,
        )

    def for_organization(self, org_slug: str) -> "Config":
        """Identity of a server pinned to a single organization."""
        return Config(
            server_name=f"{org_slug}-docs",
            server_version=self.server_version,
            search_limit=self.search_limit,
        )

    @property
    def server_info(self) -> dict[str, str]:
        return {"name": self.server_name, "version": self.server_version}

    def __repr__(self) -> str:
        return f"Config(server_name='{self.server_name}')"
