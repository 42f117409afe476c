# Copyright (c) 2025-present Cesar Saguier Antebi
#
# This file is part of jsonrpc-proxy.
#
# Licensed under the Business Source License 1.1 (the "License");
# you may not use this file except in compliance with the License.
# See LICENSE file in the project root for full license information.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging helpers for jsonrpc-proxy."""

import logging
import sys
from typing import Optional

ROOT_LOGGER = "jsonrpc_proxy"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def setup_logger(level: str = "INFO", name: str = ROOT_LOGGER) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Library code never calls this; it is meant for scripts and examples
    that want to see request/response traffic.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        name: Logger name

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Don't add handlers if they already exist
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logger.level)
    handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger below the package namespace."""
    if name is None or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
