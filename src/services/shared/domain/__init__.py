from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
    DomainException as DomainException,
    DuplicateResourceException as DuplicateResourceException,
    InvalidInputException as InvalidInputException,
    OptimisticLockException as OptimisticLockException,
    ResourceNotFoundException as ResourceNotFoundException,
)
from .repository import Repository as Repository
from .value_object import (
    Currency as Currency,
    Email as Email,
    IsoDateTime as IsoDateTime,
    Money as Money,
)
