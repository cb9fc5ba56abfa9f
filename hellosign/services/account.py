from hellosign.models import Account, AccountEnvelope
from hellosign.params import CallbackUrlParams, EmailAddressParams
from hellosign.services.hellosign_service import HelloSignService


class AccountAPI(HelloSignService):
    """Account manipulations."""

    def get(self) -> Account:
        """Return your account settings."""
        return self._get_and_parse("account", AccountEnvelope).account

    def update(self, callback_url: str) -> Account:
        """Set the callback url of your account."""
        envelope = self._post_form_and_parse(
            "account", CallbackUrlParams(callback_url=callback_url), AccountEnvelope
        )
        return envelope.account

    def _create_or_verify(self, endpoint: str, email_address: str) -> Account:
        envelope = self._post_form_and_parse(
            endpoint, EmailAddressParams(email_address=email_address), AccountEnvelope
        )
        return envelope.account

    def create(self, email_address: str) -> Account:
        """Sign up for a new HelloSign account."""
        return self._create_or_verify("account/create", email_address)

    def verify(self, email_address: str) -> Account:
        """Verify whether a HelloSign account exists."""
        return self._create_or_verify("account/verify", email_address)
