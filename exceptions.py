"""
exceptions.py
=============
PASSFORGE — Hierarchical Exception System

All application exceptions inherit from PassforgeError so callers
can catch the full hierarchy with a single except clause when needed.

Structure
---------
PassforgeError
├── ValidationError
│   └── InvalidPolicyError
├── ServiceError
│   └── GenerationError
│       └── GenerationExhaustedError
└── ConfigurationError
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class PassforgeError(Exception):
    """Base exception for all PASSFORGE errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "POLICY_INVALID"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Validation ──────────────────────────────────────────────────────────────

class ValidationError(PassforgeError):
    """Raised when caller-provided data fails validation."""

    def __init__(self, message: str = "", *, field: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class InvalidPolicyError(ValidationError):
    """
    Raised when a password policy cannot be used for generation.

    Always raised before any randomness is consumed; no partial
    password is ever produced.
    """

    def __init__(self, reason: str = "", *, field: str = "", **kwargs):
        msg = "Invalid password policy"
        if reason:
            msg += f": {reason}"
        kwargs.setdefault("code", "POLICY_INVALID")
        super().__init__(msg, field=field, **kwargs)
        self.reason = reason


# ─── Service ─────────────────────────────────────────────────────────────────

class ServiceError(PassforgeError):
    """Base for errors raised by the service layer."""


class GenerationError(ServiceError):
    """Raised when password generation fails."""


class GenerationExhaustedError(GenerationError):
    """
    Raised when every candidate within the retry bound matched a weak pattern.

    This is an internal fault, not a user input error.
    """

    def __init__(self, attempts: int = 0, **kwargs):
        msg = f"No acceptable password after {attempts} attempts"
        kwargs.setdefault("code", "GEN_EXHAUSTED")
        super().__init__(msg, **kwargs)
        self.attempts = attempts


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(PassforgeError):
    """Raised when the application configuration is invalid or incomplete."""
