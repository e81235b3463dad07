from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import DomainException as DomainException
from .exceptions import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exceptions import InvalidRequestException as InvalidRequestException
from .exceptions import NoRoomAvailableException as NoRoomAvailableException
from .exceptions import (
    NotificationFailedException as NotificationFailedException,
)
from .exceptions import PaymentDeclinedException as PaymentDeclinedException
from .exceptions import RateUnavailableException as RateUnavailableException
from .exceptions import (
    ResourceNotFoundException as ResourceNotFoundException,
)
