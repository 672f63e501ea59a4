"""Exceptions for asciir with contextual information."""

from typing import Any, Dict, Optional


class AsciirError(Exception):
    """Base error for asciir with contextual information."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize an asciir error.

        Args:
            message: Error message
            context: Optional context information (token, base, value, etc.)
            original_exception: Original exception that caused this error
        """
        super().__init__(message)
        self.context = context or {}
        self.original_exception = original_exception

    @property
    def message(self) -> str:
        """The bare error message without context."""
        return super().__str__()

    def __str__(self) -> str:
        """Get string representation with context."""
        base_msg = self.message
        if self.context:
            context_items = []
            for key, value in self.context.items():
                if isinstance(value, str) and len(value) > 50:
                    # Truncate long values
                    value = value[:47] + "..."
                context_items.append(f"{key}={value}")
            context_str = ", ".join(context_items)
            return f"{base_msg} (Context: {context_str})"
        return base_msg

    def __repr__(self) -> str:
        """Get repr with context details."""
        base_repr = super().__repr__()
        if self.context:
            return f"{base_repr} (context={self.context!r})"
        return base_repr

    def add_context(self, key: str, value: Any) -> None:
        """
        Add context information to the exception.

        Args:
            key: Context key
            value: Context value
        """
        self.context[key] = value

    def get_context(self, key: str, default: Any = None) -> Any:
        """
        Get context information from the exception.

        Args:
            key: Context key
            default: Default value if key not found

        Returns:
            Context value or default
        """
        return self.context.get(key, default)


class ConversionError(AsciirError):
    """A single input value could not be converted."""

    def __init__(
        self,
        message: str,
        token: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx: Dict[str, Any] = {"token": token}
        if context:
            ctx.update(context)
        super().__init__(message, ctx)
        self.token = token


class OutOfRangeError(ConversionError):
    """Numeric value parsed but is not a printable codepoint."""

    def __init__(self, token: str, value: int, **context: Any):
        super().__init__(
            f"Codepoint {value} not in the range 33-126",
            token,
            dict(context, value=value),
        )
        self.value = value


class NotAsciiError(ConversionError):
    """Single character outside the ASCII range."""

    def __init__(self, token: str, **context: Any):
        super().__init__(f"{token} is not an ASCII value", token, context)


class MultiCharacterError(ConversionError):
    """Input is empty or longer than one character and not a number."""

    def __init__(self, token: str, **context: Any):
        super().__init__(
            f'Input "{token}" must be a single character', token, context
        )
