from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    IncompleteSeatSelectionException,
    InvalidFieldException,
    InvalidInputException,
    MissingFieldException,
    OptimisticLockException,
    ResourceNotFoundException,
    SeatAlreadyTakenException,
    SeatCapacityExceededException,
    StoreFailureException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "SeatCapacityExceededException",
    "IncompleteSeatSelectionException",
    "DuplicateResourceException",
    "SeatAlreadyTakenException",
    "OptimisticLockException",
    "InvalidInputException",
    "MissingFieldException",
    "InvalidFieldException",
    "StoreFailureException",
]
