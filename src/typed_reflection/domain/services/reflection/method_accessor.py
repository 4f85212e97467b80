#!/usr/bin/env python3

"""Typed accessor for private methods."""

from collections.abc import Callable
from typing import Any

from .base_accessor import BaseAccessor, V


class MethodAccessor(BaseAccessor[V]):
    """A private method obtained through reflection, typed by its return value."""

    def get(self) -> Callable[..., Any]:
        """Get the bound method (or function, for static methods)."""
        return self._reader

    def invoke(self, *args: Any, **kwargs: Any) -> V:
        """Invoke the method and check its return value.

        Args:
            *args: Positional arguments passed to the method
            **kwargs: Keyword arguments passed to the method

        Returns:
            The method's return value

        Raises:
            TypeMismatch: The return value isn't an instance of the requested type
            AccessFailure: The method raised an exception
        """
        try:
            result = self._reader(*args, **kwargs)
        except Exception as e:
            self._fail_access(f"Couldn't invoke the private {self.display_name} method", e)
        return self._check_result(result, f"the return value of the private {self.display_name} method")
