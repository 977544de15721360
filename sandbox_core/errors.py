"""Errors raised while assembling the sandbox environment."""


class SandboxError(Exception):
    """Base type for sandbox bootstrap failures."""


class AddressingError(SandboxError):
    """Raised when a derived resource suffix is malformed."""


class SeedWriteError(SandboxError):
    """Raised when the virtual store rejects a seed write."""
