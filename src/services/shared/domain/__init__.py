from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    InvalidFieldException as InvalidFieldException,
)
from .exception import (
    InvalidInputException as InvalidInputException,
)
from .exception import (
    MissingFieldException as MissingFieldException,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    StoreFailureException as StoreFailureException,
)
from .value_object import (
    IsoDateTime as IsoDateTime,
)
