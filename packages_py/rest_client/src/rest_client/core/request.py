"""
Request assembly: merges client and request configuration into a PreparedRequest.
"""
import logging
from typing import Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ..config import DEFAULT_USER_AGENT, ClientConfig, RestRequest
from ..serialization import JsonSerializer
from ..types import BODY_METHODS, FORM_CONTENT_TYPE, Pairs, PreparedRequest, Serializer

logger = logging.getLogger(__name__)


def build_url(authority: str, version_path: Optional[str] = None, path: str = "") -> str:
    """Join authority, version path and path with single slashes."""
    url = authority.rstrip("/")
    if version_path and version_path.strip("/"):
        url = f"{url}/{version_path.strip('/')}"
    if path and path.lstrip("/"):
        url = f"{url}/{path.lstrip('/')}"
    return url


def _split_query(url: str) -> Tuple[str, Pairs]:
    parts = urlsplit(url)
    if not parts.query:
        return url, []
    base = urlunsplit((parts.scheme, parts.netloc, parts.path, "", parts.fragment))
    return base, parse_qsl(parts.query, keep_blank_values=True)


def prepare_request(
    config: ClientConfig,
    request: RestRequest,
    serializer: Optional[Serializer] = None,
) -> PreparedRequest:
    """
    Build the outgoing request.

    Client-level and request-level headers/parameters are unioned, never
    overwritten. Credentials are applied last so signatures cover the final
    URL, parameters and body.
    """
    method = (request.method or config.method).upper()
    url, query_params = _split_query(build_url(config.authority, config.version_path, request.path))

    prepared = PreparedRequest(
        method=method,
        url=url,
        headers=[*config.headers, *request.headers],
    )
    params: Pairs = [*query_params, *config.parameters, *request.parameters]

    if not prepared.has_header("User-Agent"):
        prepared.headers.append(("User-Agent", config.user_agent or DEFAULT_USER_AGENT))

    if request.entity is not None:
        serializer = serializer or JsonSerializer()
        prepared.content = serializer.serialize(request.entity)
        if not prepared.has_header("Content-Type"):
            prepared.headers.append(("Content-Type", serializer.content_type))
        prepared.params = params
    elif method in BODY_METHODS and params:
        prepared.content = urlencode(params)
        if not prepared.has_header("Content-Type"):
            prepared.headers.append(("Content-Type", FORM_CONTENT_TYPE))
    else:
        prepared.params = params

    credentials = request.credentials or config.credentials
    if credentials is not None:
        prepared = credentials.apply(prepared)

    logger.debug(
        f"prepare_request: {prepared.method} {prepared.url} "
        f"headers={len(prepared.headers)} params={len(prepared.params)}"
    )
    return prepared
