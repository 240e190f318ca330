from .credentials import BasicAuthCredentials, WebCredentials
from .oauth import OAuthCredentials

__all__ = ["WebCredentials", "BasicAuthCredentials", "OAuthCredentials"]
