"""
Tests for vctoolkit.toolchain.tools module.
"""

from pathlib import Path

from tests.fixtures.toolchains import make_executable
from vctoolkit.toolchain.tools import ToolRegistry, ToolSlot, ToolType


class TestToolType:
    """Tests for ToolType enumeration."""

    def test_enumeration_order(self):
        """Test tool roles keep their fixed order."""
        assert list(ToolType) == [
            ToolType.C_COMPILER,
            ToolType.CPP_COMPILER,
            ToolType.ASSEMBLER,
            ToolType.LINKER,
            ToolType.STATIC_LIB_ARCHIVER,
        ]

    def test_tool_names(self):
        """Test human-readable tool names."""
        assert ToolType.CPP_COMPILER.tool_name == "C++ compiler"
        assert ToolType.STATIC_LIB_ARCHIVER.tool_name == "Static library archiver"


class TestToolRegistry:
    """Tests for ToolRegistry."""

    def test_one_slot_per_tool_type(self):
        """Test registry has exactly one slot for every role."""
        registry = ToolRegistry()

        slots = list(registry.slots())

        assert [slot.tool_type for slot in slots] == list(ToolType)
        assert all(isinstance(slot, ToolSlot) for slot in slots)
        assert all(slot.resolved_path is None for slot in slots)

    def test_initial_exe_names(self):
        """Test executable names passed at construction."""
        registry = ToolRegistry({ToolType.LINKER: "link.exe"})

        assert registry.get_exe_name(ToolType.LINKER) == "link.exe"
        assert registry.get_exe_name(ToolType.ASSEMBLER) == "assembler"

    def test_set_exe_name(self):
        """Test renaming a tool clears its resolved path."""
        registry = ToolRegistry()
        registry.slot(ToolType.LINKER).resolved_path = Path("/old/link.exe")

        registry.set_exe_name(ToolType.LINKER, "lld-link.exe")

        assert registry.get_exe_name(ToolType.LINKER) == "lld-link.exe"
        assert registry.slot(ToolType.LINKER).resolved_path is None

    def test_locate_in_search_path(self, tmp_path, empty_path):
        """Test locating a tool in the slot's search path."""
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        make_executable(second / "link.exe")

        registry = ToolRegistry({ToolType.LINKER: "link.exe"})
        registry.set_path([first, second])

        located = registry.locate(ToolType.LINKER)

        assert located == (second / "link.exe").absolute()
        assert registry.slot(ToolType.LINKER).resolved_path == located

    def test_locate_search_path_order(self, tmp_path, empty_path):
        """Test earlier search path entries win."""
        make_executable(tmp_path / "a" / "lib.exe")
        make_executable(tmp_path / "b" / "lib.exe")

        registry = ToolRegistry({ToolType.STATIC_LIB_ARCHIVER: "lib.exe"})
        registry.set_path([tmp_path / "a", tmp_path / "b"])

        assert registry.locate(ToolType.STATIC_LIB_ARCHIVER) == (
            tmp_path / "a" / "lib.exe"
        ).absolute()

    def test_locate_falls_back_to_process_path(self, tools_on_path):
        """Test locating via PATH when the search path is empty."""
        registry = ToolRegistry({ToolType.CPP_COMPILER: "cl.exe"})

        located = registry.locate(ToolType.CPP_COMPILER)

        assert located is not None
        assert located.name == "cl.exe"
        assert located.parent == tools_on_path.absolute()

    def test_locate_not_found(self, empty_path):
        """Test locating a missing tool returns None."""
        registry = ToolRegistry({ToolType.ASSEMBLER: "ml.exe"})

        assert registry.locate(ToolType.ASSEMBLER) is None
        assert registry.slot(ToolType.ASSEMBLER).resolved_path is None

    def test_locate_does_not_cache(self, tmp_path, empty_path):
        """Test locate searches again after reconfiguration."""
        make_executable(tmp_path / "old" / "link.exe")
        make_executable(tmp_path / "new" / "link.exe")

        registry = ToolRegistry({ToolType.LINKER: "link.exe"})
        registry.set_path([tmp_path / "old"])
        assert registry.locate(ToolType.LINKER).parent.name == "old"

        registry.set_path([tmp_path / "new"])
        assert registry.locate(ToolType.LINKER).parent.name == "new"

    def test_get_path_union(self, tmp_path):
        """Test merged search path keeps order and removes duplicates."""
        registry = ToolRegistry()
        registry.set_path([tmp_path / "a", tmp_path / "b"])
        registry.slot(ToolType.LINKER).search_path.append(tmp_path / "c")

        assert registry.get_path() == [tmp_path / "a", tmp_path / "b", tmp_path / "c"]
        assert registry.get_path(ToolType.ASSEMBLER) == [tmp_path / "a", tmp_path / "b"]

    def test_set_environment_overwrites(self):
        """Test environment is replaced, not merged."""
        registry = ToolRegistry()
        registry.set_environment({"INCLUDE": "a", "STALE": "x"})

        registry.set_environment({"INCLUDE": "b"})

        assert registry.get_environment() == {"INCLUDE": "b"}
        assert registry.get_environment(ToolType.LINKER) == {"INCLUDE": "b"}

    def test_get_environment_returns_copy(self):
        """Test callers cannot mutate the registry through accessors."""
        registry = ToolRegistry()
        registry.set_environment({"LIB": "x"})

        registry.get_environment(ToolType.LINKER)["LIB"] = "changed"

        assert registry.get_environment(ToolType.LINKER) == {"LIB": "x"}

    def test_copy_is_independent(self, tmp_path):
        """Test copies do not share slots."""
        registry = ToolRegistry({ToolType.LINKER: "link.exe"})
        registry.set_path([tmp_path])
        registry.set_environment({"LIB": "x"})

        clone = registry.copy()
        clone.set_path([tmp_path / "other"])
        clone.set_environment({"LIB": "y"})
        clone.set_exe_name(ToolType.LINKER, "other.exe")

        assert registry.get_path() == [tmp_path]
        assert registry.get_environment() == {"LIB": "x"}
        assert registry.get_exe_name(ToolType.LINKER) == "link.exe"
