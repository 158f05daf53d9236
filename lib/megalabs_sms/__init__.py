from .client import MegalabsSmsClient
from .config_types import ClientConfig
from .errors import InvalidArgumentError, MegalabsSmsError
from .logging_ import NullLogger, SmsLogger, StdlibLogger
from .request import ENDPOINT, SmsMessage
from .version import __version__

__all__ = [
    "MegalabsSmsClient",
    "ClientConfig",
    "InvalidArgumentError",
    "MegalabsSmsError",
    "NullLogger",
    "SmsLogger",
    "StdlibLogger",
    "ENDPOINT",
    "SmsMessage",
    "__version__",
]
