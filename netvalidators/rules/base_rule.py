"""
Base Rule Interface
Abstract base class for validation rule implementations
"""

from abc import ABC, abstractmethod
from typing import Optional


class BaseRule(ABC):
    """
    Abstract base class for validation rules.
    All rule implementations must inherit this class.

    A rule is configured once in its constructor and is immutable afterwards,
    so a single instance can be shared between threads.
    """

    @abstractmethod
    def is_valid(self, value: Optional[str]) -> bool:
        """
        Check a candidate value.

        Args:
            value: String to validate. None is always invalid.

        Returns:
            True if the value is syntactically well formed
        """
        pass

    def __call__(self, value: Optional[str]) -> bool:
        return self.is_valid(value)

    def get_rule_name(self) -> str:
        """
        Get rule name.
        Default implementation returns class name.

        Returns:
            Rule name string
        """
        return self.__class__.__name__.replace("Rule", "")
