"""
Tool chain availability checking.

Probes run in order and stop at the first failure; the failing probe's
message becomes the reason the tool chain is unavailable.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Result of a single availability probe."""

    name: str
    passed: bool
    message: str


class ToolChainAvailability:
    """
    Accumulates availability probes for a tool chain.

    Once a probe fails the chain is unavailable and later probes are ignored.

    Example:
        >>> availability = ToolChainAvailability()
        >>> availability.must_exist("cl.exe", None)
        >>> availability.is_available
        False
        >>> availability.unavailable_message
        'cl.exe could not be found'
    """

    def __init__(self):
        self._results: List[CheckResult] = []
        self._unavailable_message: Optional[str] = None

    @property
    def is_available(self) -> bool:
        return self._unavailable_message is None

    @property
    def unavailable_message(self) -> Optional[str]:
        return self._unavailable_message

    @property
    def results(self) -> List[CheckResult]:
        """Probe results in evaluation order, ending at the first failure."""
        return list(self._results)

    @property
    def failure(self) -> Optional[CheckResult]:
        """The probe that made the tool chain unavailable, if any."""
        if self.is_available:
            return None
        return self._results[-1]

    def unavailable(self, reason: str, name: str = "availability"):
        """
        Mark the tool chain unavailable.

        Args:
            reason: Human-readable reason
            name: Label of the probe that failed
        """
        if not self.is_available:
            return
        logger.debug(f"Tool chain unavailable: {reason}")
        self._results.append(CheckResult(name=name, passed=False, message=reason))
        self._unavailable_message = reason

    def must_exist(self, name: str, candidate):
        """
        Require a located file or directory.

        Args:
            name: What was being located (e.g., 'Windows SDK')
            candidate: Located path, or None if not found
        """
        if not self.is_available:
            return
        if candidate is None:
            self.unavailable(f"{name} could not be found", name=name)
            return
        self._results.append(
            CheckResult(name=name, passed=True, message=f"{name} found at {candidate}")
        )

    def must_be_true(self, name: str, condition: bool, message: Optional[str] = None):
        """Require an arbitrary condition."""
        if not self.is_available:
            return
        if not condition:
            self.unavailable(message or f"{name} check failed", name=name)
            return
        self._results.append(CheckResult(name=name, passed=True, message="OK"))

    def __repr__(self) -> str:
        if self.is_available:
            return "ToolChainAvailability(available)"
        return f"ToolChainAvailability(unavailable: {self._unavailable_message})"
