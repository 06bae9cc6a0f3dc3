"""
Element dispatcher with fail-loud ABC checking.

The grid builder wires elements to fields only through these methods.
A backend element that lacks a required ABC raises TypeError at build
time instead of silently dropping user edits.
"""

from typing import Any, Callable

from pyqt_gridgen.protocols import ChangeSignalEmitter, ValueGettable, ValueSettable


class WidgetDispatcher:
    """
    Binds fields to elements through the element ABCs only.

    Example:
        WidgetDispatcher.set_value(spin_box, 5)  # Raises TypeError if not ValueSettable
    """

    @staticmethod
    def get_value(element: Any) -> Any:
        """
        Read the value an element currently shows.

        Raises:
            TypeError: If element doesn't implement ValueGettable ABC
        """
        if not isinstance(element, ValueGettable):
            raise TypeError(
                f"Grid element {type(element).__name__} cannot be bound: it does not implement ValueGettable. "
                f"Adapt it in protocols.widget_adapters with a get_value() method."
            )
        return element.get_value()

    @staticmethod
    def set_value(element: Any, value: Any) -> None:
        """
        Show a field value on an element using explicit ABC check.

        Raises:
            TypeError: If element doesn't implement ValueSettable ABC
        """
        if not isinstance(element, ValueSettable):
            raise TypeError(
                f"Grid element {type(element).__name__} cannot be bound: it does not implement ValueSettable. "
                f"Adapt it in protocols.widget_adapters with a set_value() method."
            )
        element.set_value(value)

    @staticmethod
    def connect_change_signal(element: Any, callback: Callable[[Any], None]) -> None:
        """
        Route user edits of an element to callback.

        Args:
            element: The element to connect
            callback: Callback receiving the new value

        Raises:
            TypeError: If element doesn't implement ChangeSignalEmitter ABC
        """
        if not isinstance(element, ChangeSignalEmitter):
            raise TypeError(
                f"Grid element {type(element).__name__} cannot be bound: it does not implement ChangeSignalEmitter. "
                f"Adapt it in protocols.widget_adapters with a "
                f"connect_change_signal() method."
            )
        element.connect_change_signal(callback)
