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

"""HTTP transport: POST a JSON payload and decode the reply."""

from typing import Any

import requests

from .errors import TransportError
from .log import get_logger
from .options import TransportOptions

logger = get_logger(__name__)


def post(url: str, payload: Any, options: TransportOptions) -> Any:
    """
    POST ``payload`` as JSON to ``url``.

    Returns the decoded JSON body, or the raw body text when it is not JSON.

    Raises:
        TransportError: on connection failures, timeouts and non-2xx replies
    """
    try:
        response = requests.post(
            url,
            json=payload,
            headers=options.request_headers(),
            timeout=options.timeout,
            verify=options.verify,
            auth=options.auth,
        )
    except requests.exceptions.RequestException as e:
        logger.warning(f"Request to {url} failed: {e}")
        raise TransportError(f"Request failed: {str(e)}") from e

    if not response.ok:
        logger.warning(f"HTTP {response.status_code} from {url}")
        raise TransportError(
            f"HTTP {response.status_code}: {response.text}",
            status_code=response.status_code,
            details=response.text,
        )

    try:
        return response.json()
    except ValueError:
        logger.debug(f"Non-JSON body from {url} ({len(response.text)} chars)")
        return response.text
