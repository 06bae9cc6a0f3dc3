"""
Widget ABC contracts for generated grids.

Defines explicit contracts that every generated input element implements,
so the grid builder never has to guess which Qt method reads or writes a
value.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable


class ValueGettable(ABC):
    """
    ABC for elements that can return a value.

    Every input element implements this so the grid can read user edits.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the element.

        Returns:
            The element's current value. None if no value set.
        """
        pass


class ValueSettable(ABC):
    """
    ABC for elements that can display a value taken from the bound object.
    """

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the element's value without reporting it as a user edit.

        Args:
            value: The value to show. None clears the element.
        """
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for elements that report user edits through a callback.
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to value changes.

        Args:
            callback: Called with the element's new value
        """
        pass


class EditableConfigurable(ABC):
    """
    ABC for elements whose editability can be switched off.

    A non-editable element still shows its value but accepts neither
    input nor keyboard focus.
    """

    @abstractmethod
    def set_editable(self, editable: bool) -> None:
        """
        Enable or disable user input.

        Args:
            editable: False makes the element read-only and unreachable by focus
        """
        pass


class ChoicePopulatable(ABC):
    """
    ABC for choice elements filled from an enum or a fixed option list.
    """

    @abstractmethod
    def populate_choices(self, choices: Iterable[Any]) -> None:
        """
        Replace the selectable entries.

        Args:
            choices: Values to offer, in display order
        """
        pass
