from typing import Optional, Union

from hellosign.models import FileUrl, Template, TemplateEnvelope, TemplateList
from hellosign.params import ListParams, MemberParams, TemplateEmbeddedDraftParams
from hellosign.services.hellosign_service import HelloSignService


class TemplateAPI(HelloSignService):
    """Template manipulations."""

    def get(self, template_id: str) -> Template:
        return self._get_and_parse(f"template/{template_id}", TemplateEnvelope).template

    def list(self, params: Optional[ListParams] = None) -> TemplateList:
        return self._list("template/list", params, TemplateList)

    def add_user(self, template_id: str, account_id: Optional[str] = None,
                 email_address: Optional[str] = None) -> Template:
        """Give an account access to a template."""
        params = MemberParams(account_id=account_id, email_address=email_address)
        return self._post_form_and_parse(f"template/add_user/{template_id}", params, TemplateEnvelope).template

    def remove_user(self, template_id: str, account_id: Optional[str] = None,
                    email_address: Optional[str] = None) -> Template:
        """Remove an account's access to a template."""
        params = MemberParams(account_id=account_id, email_address=email_address)
        return self._post_form_and_parse(f"template/remove_user/{template_id}", params, TemplateEnvelope).template

    def files(self, template_id: str, file_type: str = "", get_url: bool = False) -> Union[bytes, FileUrl]:
        return self._get_files(f"template/files/{template_id}", file_type, get_url)

    def delete(self, template_id: str) -> bool:
        return self._post_empty_expect(f"template/delete/{template_id}", 200)

    def create_embedded_draft(self, params: TemplateEmbeddedDraftParams) -> Template:
        """Create a template draft to be finished in an embedded editor.

        The returned template carries the ``edit_url`` to open.
        """
        return self._post_form_and_parse(
            "template/create_embedded_draft", params.with_files_read(), TemplateEnvelope
        ).template
