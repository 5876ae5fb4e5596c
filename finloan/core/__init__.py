from finloan.core.config import Settings, settings
from finloan.core.exceptions import (
    FinloanError,
    ValidationError,
    InvalidInput,
    NotFound,
    PersistenceError,
)
from finloan.core.security import hash_password, verify_password
