"""Centralized exit codes for the lincol CLI."""

from ..exceptions import MalformedPointerError, OutOfRangeError, ParseError


class ExitCodes:
    """Standard exit codes for lincol CLI commands.

    2 is left to click for usage errors.
    """

    SUCCESS = 0

    NOT_FOUND = 1

    PARSE_FAILED = 3
    MALFORMED_POINTER = 4
    INTERNAL_ERROR = 5
    READ_FAILED = 6

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success - pointer resolved",
            cls.NOT_FOUND: "Pointer not present in the document",
            cls.PARSE_FAILED: "Document could not be parsed",
            cls.MALFORMED_POINTER: "Pointer is not a valid RFC 6901 JSON Pointer",
            cls.INTERNAL_ERROR: "Parser reported a position outside the document",
            cls.READ_FAILED: "Input file could not be read or decoded",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")

    @classmethod
    def for_error(cls, error: Exception) -> int:
        """Map a library error to the exit code a command should end with."""
        if isinstance(error, ParseError):
            return cls.PARSE_FAILED
        if isinstance(error, MalformedPointerError):
            return cls.MALFORMED_POINTER
        if isinstance(error, OutOfRangeError):
            return cls.INTERNAL_ERROR
        return cls.READ_FAILED
