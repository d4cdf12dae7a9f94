"""Error codes, the exception type raised for failures, and contract checks."""

from __future__ import annotations

from enum import IntEnum

SEVERITY_BIT = 31
CUSTOMER_BIT = 29
FACILITY_SHIFT = 16
FACILITY_MASK = 0x7FF
FACILITY_WIN32 = 7
FACILITY_COTIGRAPHY = 1997

_SEVERITY_ERROR = 1 << SEVERITY_BIT
_CUSTOMER_FLAG = 1 << CUSTOMER_BIT
_UINT32_MASK = 0xFFFFFFFF


def _success_code(facility: int) -> int:
    return _CUSTOMER_FLAG | (facility << FACILITY_SHIFT)


def _error_code(facility: int) -> int:
    return _SEVERITY_ERROR | _CUSTOMER_FLAG | (facility << FACILITY_SHIFT)


def _is_failure(code: int) -> bool:
    return bool(code & _SEVERITY_ERROR)


def _is_custom(code: int) -> bool:
    return bool((code >> CUSTOMER_BIT) & 1)


def hresult_from_win32(code: int) -> int:
    """Map a Win32 error code to an HRESULT, as an unsigned 32-bit value."""
    code &= _UINT32_MASK
    signed = code - (1 << 32) if code & _SEVERITY_ERROR else code
    if signed <= 0:
        return code
    return (code & 0xFFFF) | (FACILITY_WIN32 << FACILITY_SHIFT) | _SEVERITY_ERROR


class ErrorCode(IntEnum):
    """HRESULT-style status codes, stored as unsigned 32-bit values."""

    SUCCEEDED = 0
    EARLY_EXIT = _success_code(FACILITY_COTIGRAPHY)
    INVALID_ARGUMENTS = _error_code(FACILITY_COTIGRAPHY)
    COMMAND_LINE_ARGUMENT_ALREADY_EXISTS = _error_code(FACILITY_COTIGRAPHY) + 1
    COMMAND_LINE_ARGUMENT_NOT_FOUND = _error_code(FACILITY_COTIGRAPHY) + 2
    MISSING_FILE_NAME = _error_code(FACILITY_COTIGRAPHY) + 3
    INVALID_FILE_EXTENSION = _error_code(FACILITY_COTIGRAPHY) + 4
    FILE_IO_FAILURE = _error_code(FACILITY_COTIGRAPHY) + 5
    # The system's "one or more arguments are invalid" HRESULT.
    INVALID_ARG = 0x80070057

    def is_failure(self) -> bool:
        """True when the severity bit marks this code as an error."""
        return _is_failure(self.value)

    def is_custom(self) -> bool:
        """True when the customer bit is set, i.e. not a system code."""
        return _is_custom(self.value)


class CoTigraphyError(Exception):
    """A failure carrying an HRESULT-style code."""

    def __init__(self, code: int, message: str = "") -> None:
        code = int(code) & _UINT32_MASK
        try:
            code = ErrorCode(code)
        except ValueError:
            pass
        self.code: int = code
        if not message:
            message = code.name if isinstance(code, ErrorCode) else f"error 0x{code:08X}"
        self.message = message
        super().__init__(message)

    @property
    def is_failure(self) -> bool:
        return _is_failure(int(self.code))

    @property
    def is_custom(self) -> bool:
        return _is_custom(int(self.code))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CoTigraphyError):
            return int(self.code) == int(other.code)
        if isinstance(other, int):
            return int(self.code) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(int(self.code))


class ContractViolation(AssertionError):
    """Raised when a precondition or postcondition of a call does not hold."""


def require(condition: object, message: str = "contract violated") -> None:
    """Raise ContractViolation with ``message`` unless ``condition`` is true."""
    if not condition:
        raise ContractViolation(message)