from .client import NfhubClient
from .config_types import ClientConfig, Environment
from .errors import (
    ApiError,
    ApiErrorsListError,
    ApiMessageError,
    ApiUnclassifiedError,
    ConfigurationError,
    NetworkError,
    NfhubClientError,
    ValidationError,
)
from .params import QueryParam
from .results import Decoded, Err, ErrorKind, Ok, Raw, RequestResult, Result

__all__ = [
    "NfhubClient",
    "ClientConfig",
    "Environment",
    "QueryParam",
    "Ok",
    "Err",
    "ErrorKind",
    "Result",
    "Raw",
    "Decoded",
    "RequestResult",
    "NfhubClientError",
    "NetworkError",
    "ConfigurationError",
    "ValidationError",
    "ApiError",
    "ApiMessageError",
    "ApiErrorsListError",
    "ApiUnclassifiedError",
]
