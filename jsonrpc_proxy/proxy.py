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

"""
JSON-RPC 2.0 proxy.

Remote methods are invoked as if they were methods of the proxy itself::

    proxy = RpcProxy('http://localhost:1080', timeout=10)
    proxy.system.listMethods()

Every request carries an id; notifications and batches are not supported.
"""

import threading
import warnings
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from .errors import (
    IdMismatchError,
    InvokeSyntaxError,
    NonJsonResponseError,
    ProtocolViolationError,
    ServerError,
)
from .log import get_logger
from .options import JSON_MEDIA_TYPE, TransportOptions
from .transport import post

logger = get_logger(__name__)

Params = Union[List[Any], Dict[str, Any]]
Transport = Callable[[str, Any, TransportOptions], Any]

# Names readable through dispatch() / plain attribute access
PROPERTIES = ("url", "options", "id")


class MediaTypeOverrideWarning(UserWarning):
    """Emitted when options ask for a media type other than application/json"""


@dataclass(frozen=True)
class Access:
    """One step of a call expression: a name access or a call."""
    kind: str
    value: Any

    ATTR = "."
    CALL = "()"

    @classmethod
    def attr(cls, name: str) -> "Access":
        return cls(cls.ATTR, name)

    @classmethod
    def call(cls, params: Optional[Params] = None) -> "Access":
        return cls(cls.CALL, params)


class RpcProxy:
    """Proxy object that manages the communication with a JSON-RPC 2.0 server"""

    def __init__(
        self,
        url: str,
        options: Optional[TransportOptions] = None,
        *,
        transport: Optional[Transport] = None,
        **option_kwargs: Any,
    ):
        if not isinstance(url, str) or not url:
            raise ValueError("url must be a non-empty string")
        if options is None:
            options = TransportOptions()
        if option_kwargs:
            options = _check_options(options).replace(**option_kwargs)
        self._url = url
        self._transport = transport or post
        self._id = 0
        self._lock = threading.Lock()
        self._apply_options(options)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._url!r}, id={self._id})"

    @property
    def url(self) -> str:
        return self._url

    @property
    def id(self) -> int:
        """Id of the most recent request, 0 before the first one."""
        return self._id

    @property
    def options(self) -> TransportOptions:
        return self._options

    @options.setter
    def options(self, options: TransportOptions) -> None:
        self._apply_options(options)

    def _apply_options(self, options: TransportOptions) -> None:
        # Called directly by __init__ and the setter; stacklevel 3 is their caller
        options = _check_options(options)
        if options.content_type != JSON_MEDIA_TYPE:
            message = (
                f"overriding option 'media_type' ({options.content_type!r}) "
                f"with '{JSON_MEDIA_TYPE}'"
            )
            logger.warning(message)
            warnings.warn(message, MediaTypeOverrideWarning, stacklevel=3)
        headers = {
            k: v for k, v in options.headers.items() if k.lower() != "content-type"
        }
        self._options = options.replace(media_type=JSON_MEDIA_TYPE, headers=headers)

    def __getattr__(self, name: str) -> "MethodRef":
        # Only reached for names that are not regular attributes
        if name.startswith("_"):
            raise AttributeError(name)
        return MethodRef(self, (name,))

    def dispatch(self, accesses: Sequence[Access]) -> Any:
        """
        Evaluate a call expression given as a sequence of accesses.

        A single name access reads a property of the proxy. One or more
        name accesses followed by a single call invoke the remote method.
        Any other shape raises InvokeSyntaxError before anything is sent.
        """
        accesses = list(accesses)
        if len(accesses) == 1 and accesses[0].kind == Access.ATTR:
            name = accesses[0].value
            if name not in PROPERTIES:
                raise InvokeSyntaxError(f"no property '{name}'")
            return getattr(self, name)

        if (
            len(accesses) < 2
            or accesses[-1].kind != Access.CALL
            or any(a.kind != Access.ATTR for a in accesses[:-1])
        ):
            raise InvokeSyntaxError("syntax error")

        return self.invoke([a.value for a in accesses[:-1]], accesses[-1].value)

    def invoke(self, path: Union[str, Sequence[str]], params: Optional[Params] = None) -> Any:
        """
        Call a remote method and return its result.

        Args:
            path: Method name segments, or a dotted method name
            params: Positional (list) or named (dict) parameters

        Raises:
            InvokeSyntaxError: bad method path or params type; nothing is sent
            NonJsonResponseError: the reply was not a JSON object
            IdMismatchError: the reply belongs to another request
            ServerError: the server returned a JSON-RPC error
            ProtocolViolationError: the reply has neither result nor error
            TransportError: propagated from the transport
        """
        method = _method_name(path)
        params = _check_params(params)

        with self._lock:
            self._id += 1
            request_id = self._id
            request = {
                'jsonrpc': '2.0',
                'method': method,
                'params': params,
                'id': request_id,
            }
            logger.debug(f"-> {method} id={request_id}")
            response = self._transport(self._url, request, self._options)

        return self._evaluate(response, method, request_id)

    def _evaluate(self, response: Any, method: str, request_id: int) -> Any:
        if not isinstance(response, Mapping):
            logger.warning(f"{method} id={request_id}: non-JSON response")
            raise NonJsonResponseError(response)

        response_id = response.get('id')
        # Parse errors and invalid requests come back with a null id
        null_id_error = response_id is None and 'error' in response
        if response_id != request_id and not null_id_error:
            logger.warning(f"{method}: response id {response_id} != request id {request_id}")
            raise IdMismatchError(response_id, request_id)

        if 'result' in response:
            logger.debug(f"<- {method} id={request_id}")
            return response['result']

        if 'error' in response:
            error = response['error']
            if not isinstance(error, Mapping):
                error = {'message': str(error)}
            logger.warning(
                f"{method} id={request_id} failed: {error.get('code')} {error.get('message')}"
            )
            raise ServerError(
                error.get('code'),
                error.get('message', 'Unknown RPC error'),
                method,
                error.get('data'),
            )

        raise ProtocolViolationError(details=dict(response))


class MethodRef:
    """
    A remote method name under construction; calling it sends the request.

    Each call is sent as soon as it is made, so proxy.system().listMethods()
    first sends a 'system' request. Use RpcProxy.dispatch() to have such
    shapes rejected before anything is sent.
    """

    def __init__(self, proxy: RpcProxy, path: tuple):
        self._proxy = proxy
        self._path = path

    def __repr__(self) -> str:
        return f"<remote method {'.'.join(self._path)!r} of {self._proxy!r}>"

    def __getattr__(self, name: str) -> "MethodRef":
        if name.startswith("_"):
            raise AttributeError(name)
        return MethodRef(self._proxy, self._path + (name,))

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if args and kwargs:
            raise InvokeSyntaxError(
                "positional and named parameters cannot be mixed in one call"
            )
        accesses = [Access.attr(name) for name in self._path]
        accesses.append(Access.call(dict(kwargs) if kwargs else list(args)))
        return self._proxy.dispatch(accesses)


def _check_options(options: Any) -> TransportOptions:
    if not isinstance(options, TransportOptions):
        raise TypeError("argument must be a TransportOptions object")
    return options


def _method_name(path: Union[str, Sequence[str]]) -> str:
    if isinstance(path, str):
        path = path.split('.')
    segments = list(path)
    if not segments:
        raise InvokeSyntaxError("empty method path")
    for segment in segments:
        if not isinstance(segment, str) or not segment:
            raise InvokeSyntaxError(f"invalid method path segment: {segment!r}")
    return '.'.join(segments)


def _check_params(params: Any) -> Params:
    if params is None:
        return []
    if isinstance(params, Mapping):
        return dict(params)
    if isinstance(params, (list, tuple)):
        return list(params)
    raise InvokeSyntaxError(
        f"params must be a list or a dict, not {type(params).__name__}"
    )
