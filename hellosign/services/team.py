from typing import Optional

from hellosign.models import Team, TeamEnvelope
from hellosign.params import MemberParams, NameParams
from hellosign.services.hellosign_service import HelloSignService


class TeamAPI(HelloSignService):
    """Team manipulations."""

    def get(self) -> Team:
        """Return your team and its members.

        Raises an APIError named ``not_found`` when you do not belong to a team.
        """
        return self._get_and_parse("team", TeamEnvelope).team

    def create(self, name: str) -> Team:
        """Create a new team and make you a member. You must not currently belong to a team."""
        return self._post_form_and_parse("team/create", NameParams(name=name), TeamEnvelope).team

    def update(self, name: str) -> Team:
        """Rename your team."""
        return self._post_form_and_parse("team", NameParams(name=name), TeamEnvelope).team

    def delete(self) -> bool:
        """Delete your team. Only possible while you are its only member."""
        return self._post_empty_expect("team/destroy", 200)

    def _add_or_remove_user(self, endpoint: str, account_id: Optional[str],
                            email_address: Optional[str]) -> Team:
        params = MemberParams(account_id=account_id, email_address=email_address)
        return self._post_form_and_parse(endpoint, params, TeamEnvelope).team

    def add_user(self, account_id: Optional[str] = None, email_address: Optional[str] = None) -> Team:
        """Add or invite a user to your team.

        Users without a HelloSign account get one created. Users with a paid
        subscription are sent an invitation instead, and users already part of
        another team cause a ``team_invite_failed`` error.
        """
        return self._add_or_remove_user("team/add_member", account_id, email_address)

    def remove_user(self, account_id: Optional[str] = None, email_address: Optional[str] = None) -> Team:
        """Remove a user from your team, expiring any outstanding invitation."""
        return self._add_or_remove_user("team/remove_member", account_id, email_address)
