"""Base classes for configuration models.

Kept in their own module so that config.py and log.py can both
depend on them without importing each other.
"""

from __future__ import annotations

import sys
from typing import Protocol, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class Closeable(Protocol):
    """Protocol for objects that support close()."""

    def close(self) -> None:
        """Release resources."""
        ...


class BaseConfig(BaseModel):
    """Base class for all configuration sections.

    A configuration section is a context manager. Closing it walks
    its fields and closes every child that implements Closeable, so
    closing the top-level Config closes the logger and its sinks:

        Config.close() → Logger.close() → Sink.close()

    A child that fails to close does not stop the others.
    """

    def close(self):
        """Close all closeable child objects."""
        for field_name in self.__class__.model_fields:
            child = getattr(self, field_name, None)
            if child is None or not isinstance(child, Closeable):
                continue
            try:
                child.close()
            except Exception as e:
                print(
                    f"Warning: Error closing {field_name}: {e}",
                    file=sys.stderr,
                )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):  # noqa: U100
        self.close()
        return False


__all__ = ["Closeable", "BaseConfig"]
