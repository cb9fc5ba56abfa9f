from hellosign.models import EmbeddedEnvelope, EmbeddedUrl
from hellosign.services.hellosign_service import HelloSignService


class EmbeddedAPI(HelloSignService):
    """Embedded signing and editing urls."""

    def get_sign_url(self, signature_id: str) -> EmbeddedUrl:
        """Get a signature url that can be opened in an iFrame."""
        return self._get_and_parse(f"embedded/sign_url/{signature_id}", EmbeddedEnvelope).embedded

    def get_template_edit_url(self, template_id: str) -> EmbeddedUrl:
        """Get a template edit url that can be opened in an iFrame.

        Only templates created through the embedded template process can be edited.
        """
        return self._get_and_parse(f"embedded/edit_url/{template_id}", EmbeddedEnvelope).embedded
