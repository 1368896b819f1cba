"""
Tests for vctoolkit.toolchain.availability module.
"""

from pathlib import Path

from vctoolkit.toolchain.availability import CheckResult, ToolChainAvailability


class TestToolChainAvailability:
    """Tests for ToolChainAvailability."""

    def test_available_by_default(self):
        """Test a fresh availability has no failures."""
        availability = ToolChainAvailability()

        assert availability.is_available is True
        assert availability.unavailable_message is None
        assert availability.results == []

    def test_must_exist_present(self):
        """Test a present candidate passes."""
        availability = ToolChainAvailability()

        availability.must_exist("Windows SDK", Path("/sdk"))

        assert availability.is_available is True
        assert availability.results[0].passed is True
        assert availability.results[0].name == "Windows SDK"

    def test_must_exist_missing(self):
        """Test a missing candidate makes the chain unavailable."""
        availability = ToolChainAvailability()

        availability.must_exist("Windows SDK", None)

        assert availability.is_available is False
        assert availability.unavailable_message == "Windows SDK could not be found"

    def test_short_circuits_after_first_failure(self):
        """Test probes after the first failure are not recorded."""
        availability = ToolChainAvailability()

        availability.must_exist("first", Path("/a"))
        availability.must_exist("second", None)
        availability.must_exist("third", None)
        availability.must_be_true("fourth", False)

        assert availability.unavailable_message == "second could not be found"
        assert [r.name for r in availability.results] == ["first", "second"]

    def test_unavailable(self):
        """Test explicit unavailability keeps the first reason."""
        availability = ToolChainAvailability()

        availability.unavailable("Not available on this operating system.")
        availability.unavailable("later reason")

        assert availability.is_available is False
        assert (
            availability.unavailable_message
            == "Not available on this operating system."
        )
        assert len(availability.results) == 1

    def test_must_be_true(self):
        """Test condition probes."""
        availability = ToolChainAvailability()

        availability.must_be_true("writable", True)
        availability.must_be_true("version", False, "Version too old")

        assert availability.results[0] == CheckResult("writable", True, "OK")
        assert availability.unavailable_message == "Version too old"

    def test_repr(self):
        """Test string representation mentions the reason."""
        availability = ToolChainAvailability()
        assert "available" in repr(availability)

        availability.must_exist("cl", None)
        assert "cl could not be found" in repr(availability)

    def test_failure(self):
        """Test the failing probe is exposed."""
        availability = ToolChainAvailability()
        assert availability.failure is None

        availability.must_exist("Visual Studio installation", Path("/vs"))
        availability.must_exist("Windows SDK", None)

        assert availability.failure == CheckResult(
            "Windows SDK", False, "Windows SDK could not be found"
        )
