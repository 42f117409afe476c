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

"""HTTP options used by the transport when posting JSON-RPC requests."""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

JSON_MEDIA_TYPE = "application/json"


@dataclass
class TransportOptions:
    # seconds, or a (connect, read) pair as accepted by requests
    timeout: Optional[Union[float, Tuple[Optional[float], Optional[float]]]] = 5.0
    headers: Dict[str, str] = field(default_factory=dict)
    media_type: str = JSON_MEDIA_TYPE
    verify: bool = True
    auth: Optional[Tuple[str, str]] = None
    user_agent: Optional[str] = None

    def __post_init__(self) -> None:
        _check_timeout(self.timeout)
        if not isinstance(self.headers, dict):
            raise TypeError("headers must be a dict")
        self.headers = dict(self.headers)

    def replace(self, **changes: Any) -> "TransportOptions":
        """Return a copy with the given options changed.

        Unknown option names raise TypeError.
        """
        known = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise TypeError(f"unknown transport option(s): {', '.join(unknown)}")
        return dataclasses.replace(self, **changes)

    @property
    def content_type(self) -> str:
        """The configured content type; an explicit header wins over media_type."""
        for key, value in self.headers.items():
            if key.lower() == "content-type":
                return value
        return self.media_type

    def request_headers(self) -> Dict[str, str]:
        """Headers for one request, Content-Type taken from media_type."""
        headers = {
            k: v for k, v in self.headers.items() if k.lower() != "content-type"
        }
        headers["Content-Type"] = self.media_type
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return headers


def _check_timeout(timeout: Any) -> None:
    if isinstance(timeout, tuple):
        if len(timeout) != 2:
            raise ValueError(f"timeout pair must be (connect, read), got {timeout!r}")
        parts = timeout
    else:
        parts = (timeout,)
    for part in parts:
        if part is not None and part <= 0:
            raise ValueError(f"timeout must be positive, got {timeout!r}")
