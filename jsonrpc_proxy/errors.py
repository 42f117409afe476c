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

"""Exceptions raised by the JSON-RPC proxy and its transport."""

from typing import Any, Optional


# Responses longer than this are cut down to TRUNCATE_KEEP chars + '...'
TRUNCATE_LIMIT = 100
TRUNCATE_KEEP = 97


class JsonRpcError(Exception):
    """Base exception for jsonrpc-proxy errors"""
    def __init__(self, message: str, code: Optional[Any] = None, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details


class InvokeSyntaxError(JsonRpcError):
    """Raised when a call expression does not have the shape name(.name)*(params)"""
    def __init__(self, message: str = "syntax error", details: Optional[Any] = None):
        super().__init__(message, "INVOKE_SYNTAX", details)


class NonJsonResponseError(JsonRpcError):
    """Raised when the server answered with something other than a JSON object"""
    def __init__(self, response: Any):
        text = truncate_response(response)
        super().__init__(
            f"server did not send a JSON response but this instead:\n{text}",
            "NON_JSON_RESPONSE",
        )
        self.response_text = text


class IdMismatchError(JsonRpcError):
    """Raised when the response id differs from the id of the request"""
    def __init__(self, response_id: Any, request_id: int):
        super().__init__(
            f"server response id ({response_id}) does not match request id ({request_id})",
            "ID_MISMATCH",
            {"response_id": response_id, "request_id": request_id},
        )
        self.response_id = response_id
        self.request_id = request_id


class ServerError(JsonRpcError):
    """Raised for a well-formed JSON-RPC error response"""
    def __init__(self, code: Any, message: str, method: str, data: Optional[Any] = None):
        super().__init__(
            f"server responded with error {code} when invoking '{method}': {message}",
            code,
            data,
        )
        self.server_message = message
        self.method = method
        self.data = data


class ProtocolViolationError(JsonRpcError):
    """Raised when a response carries neither 'result' nor 'error'"""
    def __init__(self, message: str = "server response has neither 'result' nor 'error'", details: Optional[Any] = None):
        super().__init__(message, "PROTOCOL_VIOLATION", details)


class TransportError(JsonRpcError):
    """Raised by the HTTP transport on connection failures and non-2xx replies"""
    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Any] = None):
        super().__init__(message, "HTTP_ERROR" if status_code is not None else "REQUEST_ERROR", details)
        self.status_code = status_code


def truncate_response(response: Any) -> str:
    text = str(response)
    if len(text) > TRUNCATE_LIMIT:
        text = text[:TRUNCATE_KEEP] + '...'
    return text
