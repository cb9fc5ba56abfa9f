from typing import Optional

from hellosign.models import ApiApp, ApiAppEnvelope, ApiAppList
from hellosign.params import ApiAppCreateParams, ApiAppUpdateParams, ListParams
from hellosign.services.hellosign_service import HelloSignService


class APIAppAPI(HelloSignService):
    """API app manipulations."""

    def get(self, client_id: str) -> ApiApp:
        return self._get_and_parse(f"api_app/{client_id}", ApiAppEnvelope).api_app

    def list(self, params: Optional[ListParams] = None) -> ApiAppList:
        return self._list("api_app/list", params, ApiAppList)

    def create(self, params: ApiAppCreateParams) -> ApiApp:
        return self._post_form_and_parse("api_app", params, ApiAppEnvelope).api_app

    def update(self, client_id: str, params: ApiAppUpdateParams) -> ApiApp:
        return self._post_form_and_parse(f"api_app/{client_id}", params, ApiAppEnvelope).api_app

    def delete(self, client_id: str) -> bool:
        """Delete an API app. HelloSign answers 204 on success."""
        return self._delete_expect(f"api_app/{client_id}", 204)
