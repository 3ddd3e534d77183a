"""Domain errors for MUN Admin.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from MunAdminError.
"""

from mun_admin.domain.errors.award import AwardAssignmentError, AwardsAlreadyExistError
from mun_admin.domain.errors.record import (
    DelegateImportError,
    RecordError,
    RecordNotFoundError,
    RecordValidationError,
)

__all__: list[str] = [
    "AwardAssignmentError",
    "AwardsAlreadyExistError",
    "DelegateImportError",
    "RecordError",
    "RecordNotFoundError",
    "RecordValidationError",
]
