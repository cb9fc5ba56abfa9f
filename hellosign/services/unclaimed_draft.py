from hellosign.models import UnclaimedDraft, UnclaimedDraftEnvelope
from hellosign.params import UnclaimedDraftEmbeddedParams, UnclaimedDraftParams
from hellosign.services.hellosign_service import HelloSignService


class UnclaimedDraftAPI(HelloSignService):
    """Drafts that a user claims and finishes on HelloSign."""

    def create(self, params: UnclaimedDraftParams) -> UnclaimedDraft:
        envelope = self._post_form_and_parse(
            "unclaimed_draft/create", params.with_files_read(), UnclaimedDraftEnvelope
        )
        return envelope.unclaimed_draft

    def create_embedded(self, params: UnclaimedDraftEmbeddedParams) -> UnclaimedDraft:
        envelope = self._post_form_and_parse(
            "unclaimed_draft/create_embedded", params.with_files_read(), UnclaimedDraftEnvelope
        )
        return envelope.unclaimed_draft
