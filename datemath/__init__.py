"""datemath - relative date-math expressions such as ``now-1h/h@M+2w/bw``."""

__version__ = "0.1.0"

from datemath.core.models import TokenModel  # noqa: E402
from datemath.exceptions import DateMathError, InvalidTokenError  # noqa: E402
from datemath.utils import token_to_date  # noqa: E402

__all__ = [
    "__version__",
    "DateMathError",
    "InvalidTokenError",
    "TokenModel",
    "token_to_date",
]
