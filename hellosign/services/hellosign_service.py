import logging
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar, Union

import requests
from pydantic import BaseModel

from hellosign.config import DEFAULT_API_BASE_URL
from hellosign.errors import APIError, APIWarning, HelloSignError, UnexpectedStatusError
from hellosign.marshaler import encode_query, marshal
from hellosign.models import FileUrl
from hellosign.params import FileParams, ListParams

logger = logging.getLogger(__name__)

X_RATELIMIT_LIMIT = "x-Ratelimit-Limit"
X_RATELIMIT_LIMIT_REMAINING = "x-Ratelimit-Limit-Remaining"
X_RATELIMIT_RESET = "x-Ratelimit-Reset"

DEFAULT_TIMEOUT = 30.0

M = TypeVar("M", bound=BaseModel)


def get_endpoint_url(endpoint: str, base_url: str = DEFAULT_API_BASE_URL) -> str:
    """Return the full HelloSign API url for a given endpoint."""
    return f"{base_url.rstrip('/')}/{endpoint}"


class HelloSignService:
    """Shared HTTP plumbing for every HelloSign resource API."""

    def __init__(self, api_key: str, api_base_url: str = DEFAULT_API_BASE_URL,
                 timeout: float = DEFAULT_TIMEOUT, session: Optional[requests.Session] = None):
        self.api_key = api_key
        self.api_base_url = api_base_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.rate_limit = 0  # Number of requests allowed per hour
        self.rate_limit_remaining = 0  # Remaining number of requests this hour
        self.rate_limit_reset = 0  # When the limit will be reset, in seconds from epoch
        self.last_status_code = 0

    @classmethod
    def from_config(cls, config: Dict[str, Any], session: Optional[requests.Session] = None):
        """Build the API from a :func:`hellosign.config.get_hellosign_config` dict."""
        if not config.get("api_key"):
            raise HelloSignError("HelloSign api key is not configured")
        return cls(
            config["api_key"],
            api_base_url=config.get("api_base_url", DEFAULT_API_BASE_URL),
            timeout=config.get("timeout", DEFAULT_TIMEOUT),
            session=session,
        )

    def get_endpoint_url(self, endpoint: str) -> str:
        return get_endpoint_url(endpoint, self.api_base_url)

    def perform(self, method: str, endpoint: str, params: Optional[List[Tuple[str, str]]] = None,
                payload: Optional[BaseModel] = None) -> requests.Response:
        """Send a request and map error responses to exceptions."""
        url = self.get_endpoint_url(endpoint)
        kwargs: Dict[str, Any] = {}
        if payload is not None:
            form = marshal(payload)
            kwargs.update(form.as_request_kwargs())
            logger.debug(f"Sending form to HelloSign {endpoint}: {form!r}")
        if params:
            kwargs["params"] = params

        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(
                method,
                url,
                auth=(self.api_key, ""),
                headers={"Accept": "application/json"},
                timeout=self.timeout,
                **kwargs,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {url} failed: {str(e)}")
            raise HelloSignError(f"HelloSign API request failed: {str(e)}") from e

        self.last_status_code = response.status_code
        if response.status_code >= 400:
            raise self.parse_response_error(response)
        self._update_rate_limits(response)
        return response

    def _update_rate_limits(self, response: requests.Response):
        for header, attr in (
            (X_RATELIMIT_LIMIT, "rate_limit"),
            (X_RATELIMIT_LIMIT_REMAINING, "rate_limit_remaining"),
            (X_RATELIMIT_RESET, "rate_limit_reset"),
        ):
            value = response.headers.get(header)
            if not value:
                continue
            try:
                setattr(self, attr, int(value))
            except ValueError:
                continue

    def parse_response_error(self, response: requests.Response) -> HelloSignError:
        """Turn an error response into the matching exception."""
        try:
            body = response.json()
        except ValueError:
            logger.error(f"HelloSign returned {response.status_code} with a non JSON body")
            return HelloSignError("Could not parse response error or warning")

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("error_name") is not None:
            logger.error(f"HelloSign API error: {error.get('error_name')}: {error.get('error_msg')}")
            return APIError(response.status_code, error.get("error_msg") or "", error["error_name"])

        warnings = body.get("warnings") if isinstance(body, dict) else None
        if isinstance(warnings, list):
            warnings = [w for w in warnings if isinstance(w, dict)]
        if warnings:
            logger.error(f"HelloSign API warnings: {warnings}")
            return APIWarning(
                response.status_code,
                [(w.get("warning_name", ""), w.get("warning_msg", "")) for w in warnings],
            )
        return HelloSignError("Could not parse response error or warning")

    def parse_response(self, response: requests.Response, model: Type[M]) -> M:
        if not 200 <= response.status_code < 300:
            raise HelloSignError("Status code invalid")
        try:
            return model.model_validate(response.json())
        except ValueError as e:
            logger.error(f"Could not parse HelloSign response as {model.__name__}: {str(e)}")
            raise HelloSignError(f"Could not parse response as {model.__name__}") from e

    def _get(self, endpoint: str, params: Optional[List[Tuple[str, str]]] = None) -> requests.Response:
        return self.perform("GET", endpoint, params=params)

    def _get_and_parse(self, endpoint: str, model: Type[M],
                       params: Optional[List[Tuple[str, str]]] = None) -> M:
        response = self._get(endpoint, params)
        return self.parse_response(response, model)

    def _post_form(self, endpoint: str, payload: Optional[BaseModel] = None) -> requests.Response:
        return self.perform("POST", endpoint, payload=payload)

    def _post_form_and_parse(self, endpoint: str, payload: Optional[BaseModel], model: Type[M]) -> M:
        response = self._post_form(endpoint, payload)
        return self.parse_response(response, model)

    def _post_empty_expect(self, endpoint: str, expected: int) -> bool:
        """POST without a body and check the status code."""
        response = self._post_form(endpoint)
        if response.status_code != expected:
            raise UnexpectedStatusError(response.status_code, response.reason or "")
        return True

    def _delete(self, endpoint: str) -> requests.Response:
        return self.perform("DELETE", endpoint)

    def _delete_expect(self, endpoint: str, expected: int) -> bool:
        response = self._delete(endpoint)
        if response.status_code != expected:
            raise UnexpectedStatusError(response.status_code, response.reason or "")
        return True

    def _get_files(self, endpoint: str, file_type: str = "", get_url: bool = False) -> Union[bytes, FileUrl]:
        """Download the files at an endpoint, or a link to them when ``get_url`` is set."""
        if file_type not in ("", "pdf", "zip"):
            raise ValueError("Invalid file type specified, pdf or zip")
        params = encode_query(FileParams(file_type=file_type, get_url=get_url))
        response = self._get(endpoint, params)
        if response.status_code != 200:
            raise UnexpectedStatusError(response.status_code, response.reason or "")
        if get_url:
            return self.parse_response(response, FileUrl)
        return response.content

    def _list(self, endpoint: str, params: Optional[ListParams], model: Type[M]) -> M:
        return self._get_and_parse(endpoint, model, encode_query(params or ListParams()))
