"""mcprovider - declarative lifecycle management for AWS Elemental MediaConvert resources."""

from .catalog import KINDS, describe, validate
from .client import ClientFactory, OperationContext
from .config import ProviderConfig, RetryPolicy, load_provider_config
from .resources import ResourceData, controller_for
from .translate import expand_resource, expander_for, flatten_resource, flattener_for
from .utils.errors import McProviderError
from .utils.logging import setup_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    "ClientFactory",
    "KINDS",
    "McProviderError",
    "OperationContext",
    "ProviderConfig",
    "ResourceData",
    "RetryPolicy",
    "controller_for",
    "describe",
    "expand_resource",
    "expander_for",
    "flatten_resource",
    "flattener_for",
    "load_provider_config",
    "validate",
]

setup_logging()
logger = get_logger("mcprovider")
