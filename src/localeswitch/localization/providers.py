"""Resource provider interface and reference implementations.

The localization core never touches storage directly. It consumes an
asynchronous key/value asset store through the ResourceProvider protocol:
folder enumeration for locale discovery, and existence/load/unload calls
for localized resources addressed by resolved paths.

Components:
    FolderEntry - Immutable record of a folder found under a prefix
    ResourceProvider - Protocol for async asset stores (structural typing)
    MemoryResourceProvider - Dict-backed provider for embedding and tests
    PathResourceProvider - Disk-backed provider with path-traversal prevention

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from localeswitch.constants import PATH_SEPARATOR
from localeswitch.localization.types import ResourcePath

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Data
    "FolderEntry",
    # Protocol
    "ResourceProvider",
    # Concrete providers
    "MemoryResourceProvider",
    "PathResourceProvider",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FolderEntry:
    """Folder located by a resource provider.

    Attributes:
        name: Last path segment (e.g., 'ja')
        path: Full provider path (e.g., 'Localization/ja')
    """

    name: str
    path: ResourcePath


class ResourceProvider(Protocol):
    """Protocol for asynchronous resource providers.

    This is a Protocol (structural typing) rather than ABC so that engine
    asset stores can be plugged in without inheriting from this package.

    Every coroutine method is a suspension point for the caller. The two
    synchronous methods query already-loaded state only and must not
    perform I/O.

    Example:
        >>> class BundleProvider:
        ...     async def locate_folders(self, prefix: str) -> list[FolderEntry]: ...
        ...     async def exists(self, path: str) -> bool: ...
        ...     async def load(self, path: str) -> object: ...
        ...     async def unload(self, path: str) -> None: ...
        ...     def is_loaded(self, path: str) -> bool: ...
        ...     def get_loaded_or_none(self, path: str) -> object | None: ...
    """

    async def locate_folders(self, prefix: ResourcePath) -> Sequence[FolderEntry]:
        """Enumerate the direct child folders of prefix.

        Args:
            prefix: Provider path to enumerate

        Returns:
            Child folders; empty when prefix does not exist

        Raises:
            OSError: If the underlying store cannot be enumerated
        """
        ...

    async def exists(self, path: ResourcePath) -> bool:
        """Check whether a resource exists at path."""
        ...

    async def load(self, path: ResourcePath) -> Any:
        """Load (or return the already loaded) resource at path.

        Raises:
            FileNotFoundError: If no resource exists at path
        """
        ...

    async def unload(self, path: ResourcePath) -> None:
        """Release a loaded resource. Unloading an unknown path is a no-op."""
        ...

    def is_loaded(self, path: ResourcePath) -> bool:
        """Check whether the resource at path is currently loaded."""
        ...

    def get_loaded_or_none(self, path: ResourcePath) -> Any | None:
        """Return the loaded resource at path, or None if not loaded."""
        ...


class MemoryResourceProvider:
    """Resource provider backed by an in-memory mapping.

    Folders are derived from the resource paths: every path segment that
    has children is a folder. Additional empty folders can be declared
    explicitly.

    Example:
        >>> provider = MemoryResourceProvider({
        ...     "Localization/ja/bg.png": b"...",
        ...     "Localization/de/bg.png": b"...",
        ... })
        >>> [f.name for f in await provider.locate_folders("Localization")]
        ['ja', 'de']
    """

    __slots__ = ("_folders", "_loaded", "_resources")

    def __init__(
        self,
        resources: Mapping[ResourcePath, Any] | None = None,
        *,
        folders: Iterable[ResourcePath] = (),
    ) -> None:
        self._resources: dict[ResourcePath, Any] = dict(resources or {})
        self._folders: tuple[ResourcePath, ...] = tuple(dict.fromkeys(folders))
        self._loaded: dict[ResourcePath, Any] = {}

    def add(self, path: ResourcePath, resource: Any) -> None:
        """Add or replace a resource."""
        self._resources[path] = resource

    async def locate_folders(self, prefix: ResourcePath) -> list[FolderEntry]:
        base = prefix.rstrip(PATH_SEPARATOR) + PATH_SEPARATOR
        names: dict[str, None] = {}
        for path in (*self._resources, *(f + PATH_SEPARATOR for f in self._folders)):
            if not path.startswith(base):
                continue
            name, sep, _rest = path[len(base) :].partition(PATH_SEPARATOR)
            if name and sep:
                names[name] = None
        return [FolderEntry(name=name, path=base + name) for name in names]

    async def exists(self, path: ResourcePath) -> bool:
        return path in self._resources

    async def load(self, path: ResourcePath) -> Any:
        if path in self._loaded:
            return self._loaded[path]
        try:
            resource = self._resources[path]
        except KeyError:
            raise FileNotFoundError(path) from None
        self._loaded[path] = resource
        logger.debug("Loaded resource: %s", path)
        return resource

    async def unload(self, path: ResourcePath) -> None:
        if self._loaded.pop(path, None) is not None:
            logger.debug("Unloaded resource: %s", path)

    def is_loaded(self, path: ResourcePath) -> bool:
        return path in self._loaded

    def get_loaded_or_none(self, path: ResourcePath) -> Any | None:
        return self._loaded.get(path)


@dataclass(frozen=True, slots=True)
class PathResourceProvider:
    """File system resource provider rooted at a directory.

    Provider paths are '/'-separated and relative to root_dir. Folders are
    directories, resources are files loaded as bytes. Blocking file system
    calls run in a worker thread so the event loop stays responsive.

    Security:
        Paths containing '..' segments, absolute paths and paths with a
        leading separator are rejected. All resolved paths are validated
        against the fixed root directory.

    Example:
        >>> provider = PathResourceProvider("assets")
        >>> data = await provider.load("Localization/ja/bg.png")
        # Reads: assets/Localization/ja/bg.png

    Attributes:
        root_dir: Directory all provider paths are relative to
    """

    root_dir: str | Path
    _resolved_root: Path = field(init=False, repr=False)
    _loaded: dict[ResourcePath, bytes] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        """Cache resolved root directory at initialization."""
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    @staticmethod
    def _validate_path(path: ResourcePath) -> None:
        """Validate a provider path for traversal attacks.

        Raises:
            ValueError: If path is empty or contains unsafe components
        """
        if not path:
            msg = "Resource path cannot be empty"
            raise ValueError(msg)
        if path.startswith(("/", "\\")) or Path(path).is_absolute():
            msg = f"Absolute paths not allowed in resource path: '{path}'"
            raise ValueError(msg)
        if ".." in path.replace("\\", PATH_SEPARATOR).split(PATH_SEPARATOR):
            msg = f"Path traversal sequences not allowed in resource path: '{path}'"
            raise ValueError(msg)

    def _resolve(self, path: ResourcePath) -> Path:
        """Map a provider path to a file system path inside the root.

        Raises:
            ValueError: If path is unsafe or escapes the root directory
        """
        self._validate_path(path)
        full_path = (self._resolved_root / path).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path traversal detected: resolved path escapes root directory: '{path}'"
            raise ValueError(msg) from None
        return full_path

    async def locate_folders(self, prefix: ResourcePath) -> list[FolderEntry]:
        directory = self._resolve(prefix.rstrip(PATH_SEPARATOR))

        def scan() -> list[str]:
            if not directory.is_dir():
                return []
            return sorted(p.name for p in directory.iterdir() if p.is_dir())

        names = await asyncio.to_thread(scan)
        logger.debug("Located %d folders under %s", len(names), prefix)
        base = prefix.rstrip(PATH_SEPARATOR)
        return [FolderEntry(name=name, path=f"{base}{PATH_SEPARATOR}{name}") for name in names]

    async def exists(self, path: ResourcePath) -> bool:
        full_path = self._resolve(path)
        return await asyncio.to_thread(full_path.is_file)

    async def load(self, path: ResourcePath) -> bytes:
        if path in self._loaded:
            return self._loaded[path]
        full_path = self._resolve(path)
        data = await asyncio.to_thread(full_path.read_bytes)
        self._loaded[path] = data
        logger.debug("Loaded resource: %s (%d bytes)", path, len(data))
        return data

    async def unload(self, path: ResourcePath) -> None:
        if self._loaded.pop(path, None) is not None:
            logger.debug("Unloaded resource: %s", path)

    def is_loaded(self, path: ResourcePath) -> bool:
        return path in self._loaded

    def get_loaded_or_none(self, path: ResourcePath) -> bytes | None:
        return self._loaded.get(path)
