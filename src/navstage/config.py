"""Configuration management for Navstage.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from navstage.core.types import InputItem, parse_sidebar_items

CONFIG_FILENAME = "navstage.toml"

CONSISTENCY_WARN = "warn"
CONSISTENCY_ERROR = "error"
CONSISTENCY_MODES = (CONSISTENCY_WARN, CONSISTENCY_ERROR)


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class DocsConfig:
    """Documentation configuration."""

    source_dir: Path = field(default_factory=lambda: Path("docs"))


@dataclass(frozen=True)
class TopNavItem:
    """Top navigation entry."""

    id: str
    label: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"id": self.id, "label": self.label}


@dataclass
class NavigationConfig:
    """Top navigation configuration.

    ``top`` is None when no top navigation is configured, which disables the
    sidebar consistency check.
    """

    top: list[TopNavItem] | None = None
    consistency: str = CONSISTENCY_WARN

    @property
    def top_ids(self) -> list[str] | None:
        if self.top is None:
            return None
        return [item.id for item in self.top]

    @property
    def consistency_fatal(self) -> bool:
        return self.consistency == CONSISTENCY_ERROR


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    docs: DocsConfig
    navigation: NavigationConfig
    sidebar: dict[str, tuple[InputItem, ...]] | None
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for navstage.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        """Create config with all defaults."""
        return cls(
            server=ServerConfig(),
            docs=DocsConfig(),
            navigation=NavigationConfig(),
            sidebar=None,
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            docs=cls._parse_docs(data.get("docs"), config_dir),
            navigation=cls._parse_navigation(data.get("navigation")),
            sidebar=cls._parse_sidebar(data.get("sidebar")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section."""
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Parse docs configuration section.

        Args:
            data: Raw docs section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            DocsConfig instance
        """
        if data is None:
            return DocsConfig(source_dir=config_dir / "docs")

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        source_dir = data.get("source_dir", "docs")
        if not isinstance(source_dir, str):
            raise ValueError("docs.source_dir must be a string")

        return DocsConfig(source_dir=config_dir / source_dir)

    @classmethod
    def _parse_navigation(cls, data: object) -> NavigationConfig:
        """Parse navigation configuration section.

        Args:
            data: Raw navigation section data

        Returns:
            NavigationConfig instance
        """
        if data is None:
            return NavigationConfig()

        if not isinstance(data, dict):
            raise ValueError("navigation section must be a dictionary")

        consistency = data.get("consistency", CONSISTENCY_WARN)
        if consistency not in CONSISTENCY_MODES:
            raise ValueError('navigation.consistency must be "warn" or "error"')

        top_raw = data.get("top")
        top: list[TopNavItem] | None = None
        if top_raw is not None:
            if not isinstance(top_raw, list):
                raise ValueError("navigation.top must be a list")
            top = []
            for i, item in enumerate(top_raw):
                if not isinstance(item, dict):
                    raise ValueError(f"navigation.top[{i}] must be a table")
                item_id = item.get("id")
                if not isinstance(item_id, str):
                    raise ValueError(f"navigation.top[{i}].id must be a string")
                label = item.get("label")
                if not isinstance(label, str):
                    raise ValueError(f"navigation.top[{i}].label must be a string")
                top.append(TopNavItem(id=item_id, label=label))

        return NavigationConfig(top=top, consistency=consistency)

    @classmethod
    def _parse_sidebar(cls, data: object) -> dict[str, tuple[InputItem, ...]] | None:
        """Parse sidebar section.

        Args:
            data: Raw sidebar section data (group key -> list of items)

        Returns:
            Ordered mapping of group key to input items, or None if absent
        """
        if data is None:
            return None

        if not isinstance(data, dict):
            raise ValueError("sidebar section must be a dictionary")

        return {
            key: parse_sidebar_items(items, f"sidebar.{key}")
            for key, items in data.items()
        }

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        source_dir: Path | None = None,
        consistency: str | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            source_dir: Override docs.source_dir
            consistency: Override navigation.consistency

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        docs = self.docs
        if source_dir is not None:
            docs = replace(self.docs, source_dir=source_dir)

        navigation = self.navigation
        if consistency is not None:
            if consistency not in CONSISTENCY_MODES:
                raise ValueError('consistency must be "warn" or "error"')
            navigation = replace(self.navigation, consistency=consistency)

        return replace(self, server=server, docs=docs, navigation=navigation)
