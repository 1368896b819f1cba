"""
Visual Studio and Windows SDK discovery.

Discovery never fails for a missing installation: it returns a result whose
``discovered`` flag is False. Malformed installation directories are rejected
earlier, by VisualCppToolChain.set_install_dir.
"""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

# Relative location of the compiler that marks an installation root
COMPILER_PATH = Path("VC") / "bin"
COMPILER_FILENAME = "cl.exe"

# Number of directories to ascend from a discovered compiler
MAX_ANCESTOR_DEPTH = 4

SDK_MARKERS = (
    Path("Include") / "windows.h",
    Path("include") / "windows.h",
    Path("Include") / "Windows.h",
)

SDK_ENVIRONMENT_VARIABLE = "WindowsSdkDir"

SDK_REGISTRY_KEYS = (
    r"SOFTWARE\Microsoft\Microsoft SDKs\Windows",
    r"SOFTWARE\Wow6432Node\Microsoft\Microsoft SDKs\Windows",
)

DEFAULT_SDK_LOCATIONS = (
    Path("C:/Program Files/Microsoft SDKs/Windows/v7.1"),
    Path("C:/Program Files (x86)/Microsoft SDKs/Windows/v7.1A"),
    Path("C:/Program Files/Microsoft SDKs/Windows/v7.0A"),
    Path("C:/Program Files (x86)/Microsoft SDKs/Windows/v7.0A"),
    Path("C:/Program Files/Microsoft SDKs/Windows/v6.0A"),
)


@dataclass(frozen=True)
class InstallationRoot:
    """
    Result of looking for a Visual Studio installation.

    Attributes:
        path: Installation root, None when not discovered
        discovered: Whether a valid installation was found
    """

    path: Optional[Path] = None
    discovered: bool = False

    @classmethod
    def found(cls, path: Path) -> "InstallationRoot":
        return cls(path=path, discovered=True)

    @classmethod
    def not_found(cls) -> "InstallationRoot":
        return cls()

    def __bool__(self) -> bool:
        return self.discovered


@dataclass(frozen=True)
class SdkRoot:
    """Result of looking for a Windows SDK; same shape as InstallationRoot."""

    path: Optional[Path] = None
    discovered: bool = False

    @classmethod
    def found(cls, path: Path) -> "SdkRoot":
        return cls(path=path, discovered=True)

    @classmethod
    def not_found(cls) -> "SdkRoot":
        return cls()

    def __bool__(self) -> bool:
        return self.discovered


class VisualStudioLocator:
    """
    Locates Visual Studio installations and the Windows SDK.

    The two searches are independent: an installation can be found without an
    SDK and vice versa.
    """

    def __init__(
        self,
        windows_sdk_dir: Optional[Path] = None,
        sdk_locations: Optional[Sequence[Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
        use_registry: bool = True,
    ):
        """
        Initialize locator.

        Args:
            windows_sdk_dir: Explicitly configured SDK directory, tried first
            sdk_locations: Conventional SDK locations (default: DEFAULT_SDK_LOCATIONS)
            environ: Environment to read SDK variables from (default: os.environ)
            use_registry: Whether to consult the Windows registry
        """
        self.windows_sdk_dir = Path(windows_sdk_dir) if windows_sdk_dir else None
        self.sdk_locations = list(
            DEFAULT_SDK_LOCATIONS if sdk_locations is None else sdk_locations
        )
        self.environ = os.environ if environ is None else environ
        self.use_registry = use_registry

    def locate_visual_studio(self, candidate: Optional[Path]) -> InstallationRoot:
        """
        Locate a Visual Studio installation root.

        Args:
            candidate: Installation directory, or the path of a discovered
                compiler executable

        Returns:
            InstallationRoot; not discovered when no valid root is found
        """
        if candidate is None:
            logger.debug("No Visual Studio candidate to search from")
            return InstallationRoot.not_found()

        candidate = Path(candidate)
        if not candidate.exists():
            logger.debug(f"Visual Studio candidate does not exist: {candidate}")
            return InstallationRoot.not_found()

        for root in self._candidate_roots(candidate):
            if self._is_visual_studio(root):
                logger.info(f"Found Visual Studio installation: {root}")
                return InstallationRoot.found(root.absolute())
            logger.debug(f"Not a Visual Studio installation: {root}")

        return InstallationRoot.not_found()

    def _candidate_roots(self, candidate: Path) -> List[Path]:
        if candidate.is_dir():
            return [candidate, candidate.parent]
        # Any executable name is accepted; the compiler may have been renamed
        return list(candidate.parents)[:MAX_ANCESTOR_DEPTH]

    def _is_visual_studio(self, root: Path) -> bool:
        return (root / COMPILER_PATH / COMPILER_FILENAME).is_file()

    def locate_windows_sdk(self) -> SdkRoot:
        """
        Locate the Windows SDK.

        Tries, in order: the configured directory, the WindowsSdkDir
        environment variable, the Windows registry and conventional locations.

        Returns:
            SdkRoot; not discovered when no SDK is found
        """
        for source, candidate in self._sdk_candidates():
            if candidate is None:
                continue
            if self._is_windows_sdk(candidate):
                logger.info(f"Found Windows SDK via {source}: {candidate}")
                return SdkRoot.found(candidate.absolute())
            logger.debug(f"Not a Windows SDK ({source}): {candidate}")

        logger.debug("Windows SDK not found")
        return SdkRoot.not_found()

    def _sdk_candidates(self):
        yield "configuration", self.windows_sdk_dir

        env_value = self.environ.get(SDK_ENVIRONMENT_VARIABLE)
        yield "environment", Path(env_value) if env_value else None

        if self.use_registry:
            for candidate in self._registry_sdk_dirs():
                yield "registry", candidate

        for location in self.sdk_locations:
            yield "standard location", Path(location)

    def _registry_sdk_dirs(self) -> List[Path]:
        """
        Read SDK install folders from the Windows registry.

        Returns:
            List of directories; empty when not on Windows
        """
        if sys.platform != "win32":
            return []

        import winreg

        found = []
        for key_path in SDK_REGISTRY_KEYS:
            try:
                with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, key_path) as key:
                    value, _ = winreg.QueryValueEx(key, "CurrentInstallFolder")
            except OSError as e:
                logger.debug(f"Registry key {key_path} not readable: {e}")
                continue
            if value:
                found.append(Path(value))
        return found

    def _is_windows_sdk(self, root: Path) -> bool:
        return any((root / marker).is_file() for marker in SDK_MARKERS)
