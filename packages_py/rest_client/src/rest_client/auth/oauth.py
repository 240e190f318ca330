"""
OAuth 1.0a credentials, signed with oauthlib.
"""
import logging
from dataclasses import replace
from typing import Dict, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit

from oauthlib import oauth1
from pydantic import SecretStr, model_validator

from ..types import (
    BODY_METHODS,
    FORM_CONTENT_TYPE,
    OAuthParameterHandling,
    OAuthSignatureMethod,
    OAuthType,
    PreparedRequest,
)
from .credentials import LOG_PREFIX, WebCredentials, _mask_value

logger = logging.getLogger(__name__)

_SIGNATURE_METHODS: Dict[OAuthSignatureMethod, str] = {
    OAuthSignatureMethod.HMAC_SHA1: oauth1.SIGNATURE_HMAC_SHA1,
    OAuthSignatureMethod.HMAC_SHA256: oauth1.SIGNATURE_HMAC_SHA256,
    OAuthSignatureMethod.PLAINTEXT: oauth1.SIGNATURE_PLAINTEXT,
}


def _is_form(prepared: PreparedRequest) -> bool:
    content_type = prepared.get_header("Content-Type") or ""
    return prepared.content is not None and content_type.startswith(FORM_CONTENT_TYPE)


def _with_query(url: str, params) -> str:
    if not params:
        return url
    return f"{url}?{urlencode(params)}"


class OAuthCredentials(WebCredentials):
    """
    OAuth 1.0a consumer credentials.

    The variant is picked by ``type``:
    - request_token: consumer key/secret only, empty token secret
    - access_token: exchanges a request token + verifier
    - protected_resource: signs calls with an access token
    """
    type: OAuthType = OAuthType.PROTECTED_RESOURCE
    signature_method: OAuthSignatureMethod = OAuthSignatureMethod.HMAC_SHA1
    parameter_handling: OAuthParameterHandling = OAuthParameterHandling.HTTP_AUTHORIZATION_HEADER
    consumer_key: str
    consumer_secret: SecretStr
    token: Optional[str] = None
    token_secret: Optional[SecretStr] = None
    verifier: Optional[str] = None
    callback_url: Optional[str] = None
    realm: Optional[str] = None

    # Fixed values make signing deterministic; leave unset in real use
    nonce: Optional[str] = None
    timestamp: Optional[str] = None

    @model_validator(mode="after")
    def validate_oauth_config(self) -> "OAuthCredentials":
        """Validate that required fields are present for the selected flow."""
        if not self.consumer_key or not self.consumer_secret.get_secret_value():
            raise ValueError("OAuth requires 'consumer_key' and 'consumer_secret'")

        has_token = bool(self.token) and bool(self.token_secret and self.token_secret.get_secret_value())

        if self.type == OAuthType.ACCESS_TOKEN and not (has_token and self.verifier):
            raise ValueError("access_token requires 'token', 'token_secret' and 'verifier'")

        if self.type == OAuthType.PROTECTED_RESOURCE and not has_token:
            raise ValueError("protected_resource requires 'token' and 'token_secret'")

        return self

    def _signature_type(self, prepared: PreparedRequest) -> str:
        if self.parameter_handling == OAuthParameterHandling.HTTP_AUTHORIZATION_HEADER:
            return oauth1.SIGNATURE_TYPE_AUTH_HEADER
        if _is_form(prepared) and prepared.method.upper() in BODY_METHODS:
            return oauth1.SIGNATURE_TYPE_BODY
        return oauth1.SIGNATURE_TYPE_QUERY

    def _oauth_client(self, signature_type: str) -> oauth1.Client:
        use_token = self.type != OAuthType.REQUEST_TOKEN
        token_secret = self.token_secret.get_secret_value() if self.token_secret else None
        return oauth1.Client(
            self.consumer_key,
            client_secret=self.consumer_secret.get_secret_value(),
            resource_owner_key=self.token if use_token else None,
            resource_owner_secret=token_secret if use_token else None,
            callback_uri=self.callback_url if self.type == OAuthType.REQUEST_TOKEN else None,
            verifier=self.verifier if self.type == OAuthType.ACCESS_TOKEN else None,
            signature_method=_SIGNATURE_METHODS[self.signature_method],
            signature_type=signature_type,
            realm=self.realm,
            nonce=self.nonce,
            timestamp=self.timestamp,
        )

    def apply(self, prepared: PreparedRequest) -> PreparedRequest:
        signature_type = self._signature_type(prepared)
        client = self._oauth_client(signature_type)

        is_form = _is_form(prepared)
        body = prepared.content if is_form else None
        headers = {"Content-Type": FORM_CONTENT_TYPE} if is_form else {}

        signed_uri, signed_headers, signed_body = client.sign(
            _with_query(prepared.url, prepared.params),
            http_method=prepared.method.upper(),
            body=body,
            headers=headers,
        )
        logger.debug(
            f"{LOG_PREFIX} OAuthCredentials.apply: type={self.type.value}, "
            f"consumer_key={_mask_value(self.consumer_key)}, signature_type={signature_type}"
        )

        if signature_type == oauth1.SIGNATURE_TYPE_AUTH_HEADER:
            return replace(prepared, headers=[*prepared.headers, ("Authorization", signed_headers["Authorization"])])

        if signature_type == oauth1.SIGNATURE_TYPE_BODY:
            return replace(prepared, content=signed_body)

        query = urlsplit(signed_uri).query
        return replace(prepared, params=parse_qsl(query, keep_blank_values=True))
