"""
Tool registry for a native tool chain.

Holds one ToolSlot per ToolType: the executable name, the last resolved path,
the search path and the environment overlay used when the tool runs.
"""

import copy
import logging
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


class ToolType(Enum):
    """Tool roles of a tool chain, in their fixed enumeration order."""

    C_COMPILER = "C compiler"
    CPP_COMPILER = "C++ compiler"
    ASSEMBLER = "Assembler"
    LINKER = "Linker"
    STATIC_LIB_ARCHIVER = "Static library archiver"

    @property
    def tool_name(self) -> str:
        """Human-readable tool name."""
        return self.value


@dataclass
class ToolSlot:
    """
    Configuration of a single tool.

    Attributes:
        tool_type: Role of the tool
        exe_name: Executable file name (e.g., 'cl.exe')
        resolved_path: Last located path, None until located or configured
        search_path: Directories searched before the process PATH
        environment: Environment variables set when the tool runs
    """

    tool_type: ToolType
    exe_name: str
    resolved_path: Optional[Path] = None
    search_path: List[Path] = field(default_factory=list)
    environment: Dict[str, str] = field(default_factory=dict)


class ToolRegistry:
    """
    Registry with exactly one slot per ToolType.

    Slots can be reconfigured but never added or removed.
    """

    def __init__(self, exe_names: Optional[Dict[ToolType, str]] = None):
        """
        Initialize registry.

        Args:
            exe_names: Initial executable names; tools without one default to
                their lowercase role name
        """
        names = exe_names or {}
        self._slots: Dict[ToolType, ToolSlot] = {
            tool_type: ToolSlot(
                tool_type=tool_type,
                exe_name=names.get(tool_type, tool_type.name.lower()),
            )
            for tool_type in ToolType
        }

    def slot(self, tool_type: ToolType) -> ToolSlot:
        return self._slots[tool_type]

    def slots(self) -> Iterator[ToolSlot]:
        """Iterate over slots in enumeration order."""
        for tool_type in ToolType:
            yield self._slots[tool_type]

    def set_exe_name(self, tool_type: ToolType, name: str):
        slot = self._slots[tool_type]
        slot.exe_name = name
        slot.resolved_path = None

    def get_exe_name(self, tool_type: ToolType) -> str:
        return self._slots[tool_type].exe_name

    def locate(self, tool_type: ToolType) -> Optional[Path]:
        """
        Locate the executable for a tool.

        Searches the slot's search path in order, then falls back to the
        process PATH. The result is recorded on the slot but never reused:
        every call searches again.

        Args:
            tool_type: Tool to locate

        Returns:
            Absolute path to the executable, or None if not found
        """
        slot = self._slots[tool_type]
        found = None

        for directory in slot.search_path:
            candidate = Path(directory) / slot.exe_name
            if candidate.is_file():
                found = candidate.absolute()
                break

        if found is None:
            path_str = shutil.which(slot.exe_name)
            if path_str:
                found = Path(path_str).absolute()

        if found:
            logger.debug(f"Located {tool_type.tool_name} {slot.exe_name} at {found}")
        else:
            logger.debug(f"Could not locate {tool_type.tool_name} {slot.exe_name}")

        slot.resolved_path = found
        return found

    def set_path(self, paths: List[Path]):
        """Replace the search path of every tool."""
        for slot in self._slots.values():
            slot.search_path = [Path(p) for p in paths]

    def get_path(self, tool_type: Optional[ToolType] = None) -> List[Path]:
        """
        Get a search path.

        Args:
            tool_type: Tool whose search path to return; None returns the
                ordered union across all tools

        Returns:
            List of directories
        """
        if tool_type is not None:
            return list(self._slots[tool_type].search_path)

        merged: List[Path] = []
        for slot in self.slots():
            for entry in slot.search_path:
                if entry not in merged:
                    merged.append(entry)
        return merged

    def set_environment(self, environment: Dict[str, str]):
        """Replace the environment overlay of every tool."""
        for slot in self._slots.values():
            slot.environment = dict(environment)

    def get_environment(self, tool_type: Optional[ToolType] = None) -> Dict[str, str]:
        if tool_type is not None:
            return dict(self._slots[tool_type].environment)

        merged: Dict[str, str] = {}
        for slot in self.slots():
            merged.update(slot.environment)
        return merged

    def copy(self) -> "ToolRegistry":
        """Create an independent copy of this registry."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        names = ", ".join(f"{s.tool_type.name}={s.exe_name}" for s in self.slots())
        return f"ToolRegistry({names})"
