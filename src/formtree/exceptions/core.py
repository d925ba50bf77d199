"""
Exception classes for formtree.

Validation failures are never raised: they are returned as rejection lists and
kept in node state. The exceptions here signal programmer errors, such as a
malformed field definition or a lookup of a member that does not exist.
"""


class FormTreeError(Exception):
    """Base exception for all formtree errors."""

    pass


class DefinitionError(FormTreeError, ValueError):
    """Raised when a field definition cannot be turned into a node."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: Dotted path of the offending definition (empty for the root)
            reason: The underlying reason for the failure
        """
        self.path = path
        self.reason = reason
        location = f" at '{path}'" if path else ""
        super().__init__(f"Invalid field definition{location}: {reason}")


class MemberNotFoundError(FormTreeError, KeyError):
    """Raised when a composite node has no member with the requested name."""

    def __init__(self, name: str, available: list[str]):
        """
        Initialize the exception.

        Params:
            name: The member name that was looked up
            available: Member names the composite does hold
        """
        self.name = name
        self.available = available
        super().__init__(name)

    def __str__(self) -> str:
        available = ", ".join(self.available) or "none"
        return f"No member '{self.name}'. Available members: {available}"
