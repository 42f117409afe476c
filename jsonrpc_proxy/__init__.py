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

"""Minimal JSON-RPC 2.0 client over HTTP."""

from .errors import (
    IdMismatchError,
    InvokeSyntaxError,
    JsonRpcError,
    NonJsonResponseError,
    ProtocolViolationError,
    ServerError,
    TransportError,
)
from .log import get_logger, setup_logger
from .options import JSON_MEDIA_TYPE, TransportOptions
from .proxy import Access, MediaTypeOverrideWarning, MethodRef, RpcProxy
from .transport import post

__version__ = "0.1.0"

__all__ = [
    "Access",
    "IdMismatchError",
    "InvokeSyntaxError",
    "JSON_MEDIA_TYPE",
    "JsonRpcError",
    "MediaTypeOverrideWarning",
    "MethodRef",
    "NonJsonResponseError",
    "ProtocolViolationError",
    "RpcProxy",
    "ServerError",
    "TransportError",
    "TransportOptions",
    "get_logger",
    "post",
    "setup_logger",
]
