"""
Platform-wide exception hierarchy.

Seeders and the domain services they call raise these types; the orchestrator
and the ``flask seed`` CLI catch them once and report consistently.

Usage:
    from app.core.exceptions import NotFoundError, ValidationError

    raise NotFoundError(resource="User", resource_id="admin@preiposip.com")
    raise ValidationError("Illegal KYC transition", details={"from": "verified"})
"""


class NotFoundError(Exception):
    """Raised when a prerequisite row a seeder depends on does not exist.

    Typically means seeders were run out of order (e.g. products before
    the admin user that approves their bulk purchases).

    Args:
        resource: Human-readable model/entity name (e.g. "User", "Plan").
        resource_id: The natural key or PK that was looked up.
    """

    def __init__(self, resource: str, resource_id: int | str | None = None) -> None:
        self.resource = resource
        self.resource_id = resource_id
        msg = f"{resource}"
        if resource_id is not None:
            msg += f" id={resource_id}"
        msg += " not found"
        super().__init__(msg)


class ValidationError(Exception):
    """Raised when data is well-formed but violates a business rule.

    Examples: an unknown lifecycle state, or a KYC status transition that
    the transition table does not allow.

    Args:
        message: Human-readable explanation of what failed.
        details: Optional field-level breakdown. Keys are field names;
                 values are error descriptions.
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message)


class ConflictError(Exception):
    """Raised when a natural-key lookup matches more than one row.

    Args:
        resource: Model name.
        field: The natural-key field(s) that matched ambiguously.
        value: The lookup value.
    """

    def __init__(self, resource: str, field: str, value: str | None = None) -> None:
        self.resource = resource
        self.field = field
        self.value = value
        msg = f"{resource} with {field}={value!r} matches more than one row"
        super().__init__(msg)


class SeedError(Exception):
    """Raised when a seed run cannot start.

    Unknown seeder name, or a test-data seeder requested in an environment
    where ``SEED_TEST_DATA`` is off.

    Args:
        message: Human-readable explanation.
        seeder: Name of the seeder involved, if any.
    """

    def __init__(self, message: str, seeder: str | None = None) -> None:
        self.seeder = seeder
        super().__init__(message)
