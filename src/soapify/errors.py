from __future__ import annotations


class SoapifyError(Exception):
    """Base class for all errors raised by soapify."""


class DescriptorError(SoapifyError):
    """Raised when a service or method descriptor is malformed."""


class AssemblyError(SoapifyError):
    """Raised when a generated member cannot be assembled.

    The original failure is always available as ``__cause__``.
    """

    def __init__(self, message: str, wire_name: str | None = None) -> None:
        super().__init__(message)
        self.wire_name = wire_name

    @classmethod
    def from_exception(cls, exc: BaseException, wire_name: str | None = None) -> "AssemblyError":
        target = f" for {wire_name!r}" if wire_name else ""
        return cls(f"Could not assemble member{target}: {exc}", wire_name=wire_name)
