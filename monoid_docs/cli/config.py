"""Configuration management for the Monoid Docs CLI."""

from monoid_docs.models.config import ServerConfig

# Global configuration instance
_config: ServerConfig | None = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.load_from_file()
    return _config


def set_config(config: ServerConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def get_server_base_url() -> str:
    """Get the HTTP server base URL."""
    config = get_config()
    return f"http://{config.host}:{config.port}"


def get_mcp_url(org_slug: str | None = None) -> str:
    """Get the MCP endpoint URL, optionally pinned to an organization."""
    url = f"{get_server_base_url()}/api/mcp"
    return f"{url}/{org_slug}" if org_slug else url
