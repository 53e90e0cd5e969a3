"""
PartitionHelper Core.

Contains configuration, logging, error types and value models shared by
the platform layer and the CLI.
"""

from partitionhelper.core.config import PartitionHelperConfig, load_config
from partitionhelper.core.errors import (
    CommandFailedError,
    InvalidInputError,
    ParseError,
    PartitionExistenceCheckError,
    PartitionHelperError,
    UnsupportedPartitionTableError,
)
from partitionhelper.core.logging import get_logger, setup_logging
from partitionhelper.core.models import (
    SUPPORTED_TABLE_TYPES,
    CommandTemplates,
    PartitionInfo,
    PartitionTableType,
)

__all__ = [
    "PartitionHelperConfig",
    "load_config",
    "PartitionHelperError",
    "InvalidInputError",
    "UnsupportedPartitionTableError",
    "CommandFailedError",
    "PartitionExistenceCheckError",
    "ParseError",
    "get_logger",
    "setup_logging",
    "SUPPORTED_TABLE_TYPES",
    "CommandTemplates",
    "PartitionInfo",
    "PartitionTableType",
]
