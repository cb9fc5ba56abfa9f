"""
Clients for the HelloSign e-signature API.

Every resource has its own API object sharing the same transport::

    from hellosign import SignatureRequestAPI

    api = SignatureRequestAPI("your api key")
    request = api.get("fa5c8a0b0f492d768749333ad6fcc214c111e967")

Rate limits: 2000 requests per hour for standard requests, 500 per hour for
higher tier requests and 50 per hour in test mode. The current values are
kept on each API object as ``rate_limit``, ``rate_limit_remaining`` and
``rate_limit_reset``.
"""
from hellosign.config import get_hellosign_config
from hellosign.errors import APIError, APIWarning, HelloSignError, UnexpectedStatusError
from hellosign.services.account import AccountAPI
from hellosign.services.api_app import APIAppAPI
from hellosign.services.embedded import EmbeddedAPI
from hellosign.services.hellosign_service import HelloSignService, get_endpoint_url
from hellosign.services.signature_request import SignatureRequestAPI
from hellosign.services.team import TeamAPI
from hellosign.services.template import TemplateAPI
from hellosign.services.unclaimed_draft import UnclaimedDraftAPI

__all__ = [
    "APIAppAPI",
    "APIError",
    "APIWarning",
    "AccountAPI",
    "EmbeddedAPI",
    "HelloSignError",
    "HelloSignService",
    "SignatureRequestAPI",
    "TeamAPI",
    "TemplateAPI",
    "UnclaimedDraftAPI",
    "UnexpectedStatusError",
    "get_endpoint_url",
    "get_hellosign_config",
]
