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
    InvalidRequestException as InvalidRequestException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
