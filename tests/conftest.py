# tests/conftest.py
"""
Central test configuration and fixtures.
This file is automatically loaded by pytest and provides shared fixtures
for all tests. No test talks to the real HelloSign API: every API object
gets a mocked requests session.
"""
import json
import os
from typing import Any, Dict, Optional
from unittest.mock import Mock

import pytest
import requests

# Set up test environment variables before any hellosign imports
TEST_ENV = {
    "HELLOSIGN_API_KEY": "asdf",
    "HELLOSIGN_API_BASE_URL": "https://api.hellosign.com/v3",
    "HELLOSIGN_TIMEOUT": "5",
    "HELLOSIGN_LOG_LEVEL": "debug",
    "HELLOSIGN_CALLBACK_VERIFY": "true",
}

for key, value in TEST_ENV.items():
    os.environ[key] = value

API_KEY = TEST_ENV["HELLOSIGN_API_KEY"]

ACCOUNT = {
    "account_id": "5008b25c7f67153e57d5a357b1687968068fb465",
    "email_address": "me@hellosign.com",
    "is_paid_hs": True,
    "is_paid_hf": False,
    "quotas": {
        "api_signature_requests_left": 1250,
        "documents_left": None,
        "templates_left": None,
    },
    "callback_url": None,
    "role_code": None,
}

SIGNATURE_REQUEST = {
    "signature_request_id": "fa5c8a0b0f492d768749333ad6fcc214c111e967",
    "title": "NDA with Acme Co.",
    "subject": "The NDA we talked about",
    "message": "Please sign this NDA and then we can discuss more.",
    "is_complete": False,
    "is_declined": False,
    "has_error": False,
    "test_mode": True,
    "custom_fields": [],
    "response_data": [
        {"api_id": "uniq1", "name": "Needs Express Shipping", "signature_id": "78caf2a1d01cd39cea2bc1cbb340dac3", "value": True, "type": "checkbox"},
    ],
    "signing_url": "https://www.hellosign.com/editor/sign?guid=fa5c8a0b0f492d768749333ad6fcc214c111e967",
    "signing_redirect_url": None,
    "details_url": "https://www.hellosign.com/home/manage?guid=fa5c8a0b0f492d768749333ad6fcc214c111e967",
    "requester_email_address": "me@hellosign.com",
    "signatures": [
        {
            "signature_id": "78caf2a1d01cd39cea2bc1cbb340dac3",
            "signer_email_address": "george@example.com",
            "signer_name": "George",
            "order": None,
            "status_code": "awaiting_signature",
            "signed_at": None,
            "last_viewed_at": None,
            "last_reminded_at": None,
            "has_pin": False,
        }
    ],
    "cc_email_addresses": ["lawyer@hellosign.com"],
    "metadata": {"client": "acme"},
}

TEMPLATE = {
    "template_id": "f57db65d3f933b5316d398057a36176831451a35",
    "title": "Mutual NDA",
    "message": "Please sign this NDA.",
    "signer_roles": [{"name": "Client", "order": 0}, {"name": "Witness", "order": 1}],
    "cc_roles": [{"name": "Lawyer"}],
    "documents": [
        {
            "index": 0,
            "name": "NDA.pdf",
            "form_fields": [
                {"api_id": "uniq1", "name": "Signature", "type": "signature", "x": 10, "y": 20, "width": 120, "height": 30, "required": True},
            ],
            "custom_fields": [{"name": "Company", "type": "text"}],
        }
    ],
    "accounts": [{"account_id": "5008b25c7f67153e57d5a357b1687968068fb465", "email_address": "me@hellosign.com"}],
}


def make_response(status_code: int = 200, json_body: Any = None, content: bytes = b"",
                  headers: Optional[Dict[str, str]] = None, reason: str = "OK") -> requests.Response:
    """Build a real requests.Response carrying canned data."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = content
    for header, value in (headers or {}).items():
        response.headers[header] = value
    return response


@pytest.fixture
def session():
    """A mocked requests session shared by the API under test."""
    return Mock(spec=requests.Session)


@pytest.fixture
def respond(session):
    """Set the response the mocked session answers with."""
    def _respond(status_code: int = 200, json_body: Any = None, **kwargs) -> requests.Response:
        response = make_response(status_code, json_body, **kwargs)
        session.request.return_value = response
        return response
    return _respond


@pytest.fixture
def sent(session):
    """Return (method, url, kwargs) of the last request sent through the mocked session."""
    def _sent():
        args, kwargs = session.request.call_args
        return args[0], args[1], kwargs
    return _sent


@pytest.fixture
def sent_form(sent):
    """Return the form fields of the last request as a dict."""
    def _sent_form() -> Dict[str, str]:
        _, _, kwargs = sent()
        return dict(kwargs.get("data") or [])
    return _sent_form
