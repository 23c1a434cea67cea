"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvalidCapabilityError
    │   └── InvalidQueryError
    │       ├── InvalidOperatorError
    │       └── DuplicateKeyError
    │           └── DuplicateOperatorError
    └── ApplicationError         (application.py)
        ├── NoProviderError
        └── ConfigError          (flagquery.config.validation)
"""

from flagquery.kernel.errors.application import ApplicationError, NoProviderError
from flagquery.kernel.errors.base import BaseError
from flagquery.kernel.errors.domain import (
    DomainError,
    DuplicateKeyError,
    DuplicateOperatorError,
    InvalidCapabilityError,
    InvalidOperatorError,
    InvalidQueryError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "DuplicateKeyError",
    "DuplicateOperatorError",
    "InvalidCapabilityError",
    "InvalidOperatorError",
    "InvalidQueryError",
    "NoProviderError",
]
