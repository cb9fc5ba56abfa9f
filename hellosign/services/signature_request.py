import logging
from typing import Optional, Union

from hellosign.models import FileUrl, SignatureRequest, SignatureRequestEnvelope, SignatureRequestList
from hellosign.params import (
    ListParams,
    ReminderParams,
    SignatureRequestEmbeddedParams,
    SignatureRequestEmbeddedTemplateParams,
    SignatureRequestSendParams,
    SignatureRequestTemplateParams,
    SignatureUpdateParams,
)
from hellosign.services.hellosign_service import HelloSignService

logger = logging.getLogger(__name__)


class SignatureRequestAPI(HelloSignService):
    """Signature request manipulations.

    Live signature requests need a paid API plan, HelloSign answers 402
    otherwise. Set ``test_mode`` on the parameters while developing.
    """

    def get(self, signature_request_id: str) -> SignatureRequest:
        envelope = self._get_and_parse(f"signature_request/{signature_request_id}", SignatureRequestEnvelope)
        return envelope.signature_request

    def list(self, params: Optional[ListParams] = None) -> SignatureRequestList:
        return self._list("signature_request/list", params, SignatureRequestList)

    def _send(self, endpoint: str, params) -> SignatureRequest:
        envelope = self._post_form_and_parse(endpoint, params, SignatureRequestEnvelope)
        logger.info(f"Created signature request {envelope.signature_request.signature_request_id} via {endpoint}")
        return envelope.signature_request

    def send(self, params: SignatureRequestSendParams) -> SignatureRequest:
        """Send a signature request for documents given as files, urls or file objects."""
        return self._send("signature_request/send", params.with_files_read())

    def send_with_template(self, params: SignatureRequestTemplateParams) -> SignatureRequest:
        return self._send("signature_request/send_with_template", params)

    def send_embedded(self, params: SignatureRequestEmbeddedParams) -> SignatureRequest:
        """Create a signature request to be signed in an iFrame, see EmbeddedAPI.get_sign_url."""
        return self._send("signature_request/create_embedded", params.with_files_read())

    def send_embedded_with_template(self, params: SignatureRequestEmbeddedTemplateParams) -> SignatureRequest:
        return self._send("signature_request/create_embedded_with_template", params)

    def send_reminder(self, signature_request_id: str, email_address: str,
                      name: Optional[str] = None) -> SignatureRequest:
        """Remind a signer who has not signed yet."""
        params = ReminderParams(email_address=email_address, name=name)
        envelope = self._post_form_and_parse(
            f"signature_request/remind/{signature_request_id}", params, SignatureRequestEnvelope
        )
        return envelope.signature_request

    def update(self, signature_request_id: str, signature_id: str, email_address: str) -> SignatureRequest:
        """Change the email address of a signer."""
        params = SignatureUpdateParams(signature_id=signature_id, email_address=email_address)
        envelope = self._post_form_and_parse(
            f"signature_request/update/{signature_request_id}", params, SignatureRequestEnvelope
        )
        return envelope.signature_request

    def cancel(self, signature_request_id: str) -> bool:
        """Cancel an incomplete signature request."""
        return self._post_empty_expect(f"signature_request/cancel/{signature_request_id}", 200)

    def files(self, signature_request_id: str, file_type: str = "",
              get_url: bool = False) -> Union[bytes, FileUrl]:
        """Download the documents of a signature request, or a link to them."""
        return self._get_files(f"signature_request/files/{signature_request_id}", file_type, get_url)
