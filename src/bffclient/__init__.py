"""Public API surface for bffclient."""

__version__ = "0.1.0"

from bffclient.config import ClientConfig, load_config
from bffclient.exceptions import BffClientError, CallInFlightError, ConfigError, PayloadError, TransportError
from bffclient.models import Envelope, GraphQLErrorRecord, Operation
from bffclient.orchestrator import CallOrchestrator, CallState
from bffclient.outcome import (
    MISSING_DATA_MESSAGE,
    ApplicationError,
    CallOutcome,
    MissingData,
    Success,
    TransportFailure,
    classify,
    describe,
)
from bffclient.session import StorefrontSession, StorefrontState
from bffclient.transport import GraphQLTransport

__all__ = [
    "ApplicationError",
    "BffClientError",
    "CallInFlightError",
    "CallOrchestrator",
    "CallOutcome",
    "CallState",
    "ClientConfig",
    "ConfigError",
    "Envelope",
    "GraphQLErrorRecord",
    "GraphQLTransport",
    "MISSING_DATA_MESSAGE",
    "MissingData",
    "Operation",
    "PayloadError",
    "StorefrontSession",
    "StorefrontState",
    "Success",
    "TransportError",
    "TransportFailure",
    "__version__",
    "classify",
    "describe",
    "load_config",
]
