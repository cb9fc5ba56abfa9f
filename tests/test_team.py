# tests/test_team.py
"""
Tests for team endpoints.
"""
import pytest
from pydantic import ValidationError

from conftest import API_KEY
from hellosign import APIError, TeamAPI, UnexpectedStatusError

TEAM = {
    "name": "Team HelloSign",
    "accounts": [
        {"account_id": "5008b25c7f67153e57d5a357b1687968068fb465", "email_address": "me@hellosign.com", "role_code": "a"},
        {"account_id": "d3d3d3d3d3d3d3d3d3d3d3d3d3d3d3d3d3d3d3d3", "email_address": "teammate@hellosign.com", "role_code": "m"},
    ],
    "invited_accounts": [
        {"account_id": "8e239b5a50eac117fdd9a0e2359620aa57cb2463", "email_address": "george@example.com"},
    ],
}


@pytest.fixture
def client(session):
    return TeamAPI(API_KEY, session=session)


def test_fetches_the_team(client, respond):
    respond(200, {"team": TEAM})

    team = client.get()

    assert team.name == "Team HelloSign"
    assert [a.role_code for a in team.accounts] == ["a", "m"]
    assert team.invited_accounts[0].email_address == "george@example.com"
    assert team.invited_accounts[0].role_code is None


def test_missing_team_raises_not_found(client, respond):
    respond(404, {"error": {"error_msg": "Team not found", "error_name": "not_found"}})

    with pytest.raises(APIError) as exc_info:
        client.get()

    assert exc_info.value.code == 404
    assert exc_info.value.name == "not_found"


def test_creates_a_team(client, respond, sent, sent_form):
    respond(200, {"team": {"name": "New team"}})

    team = client.create("New team")

    _, url, _ = sent()
    assert url == "https://api.hellosign.com/v3/team/create"
    assert sent_form() == {"name": "New team"}
    assert team.name == "New team"


def test_updates_a_team(client, respond, sent, sent_form):
    respond(200, {"team": {"name": "Renamed"}})

    team = client.update("Renamed")

    _, url, _ = sent()
    assert url == "https://api.hellosign.com/v3/team"
    assert sent_form() == {"name": "Renamed"}
    assert team.name == "Renamed"


def test_rejects_blank_team_name(client, session):
    with pytest.raises(ValidationError):
        client.create("   ")

    session.request.assert_not_called()


def test_deletes_a_team(client, respond, sent):
    respond(200, {})

    assert client.delete() is True

    method, url, kwargs = sent()
    assert (method, url) == ("POST", "https://api.hellosign.com/v3/team/destroy")
    assert "data" not in kwargs


def test_delete_raises_on_unexpected_status(client, respond):
    respond(204, reason="No Content")

    with pytest.raises(UnexpectedStatusError):
        client.delete()


def test_adds_a_user_by_email(client, respond, sent, sent_form):
    respond(200, {"team": TEAM})

    client.add_user(email_address="george@example.com")

    _, url, _ = sent()
    assert url == "https://api.hellosign.com/v3/team/add_member"
    assert sent_form() == {"email_address": "george@example.com"}


def test_removes_a_user_by_account_id(client, respond, sent, sent_form):
    respond(200, {"team": TEAM})

    client.remove_user(account_id="8e239b5a50eac117fdd9a0e2359620aa57cb2463")

    _, url, _ = sent()
    assert url == "https://api.hellosign.com/v3/team/remove_member"
    assert sent_form() == {"account_id": "8e239b5a50eac117fdd9a0e2359620aa57cb2463"}


@pytest.mark.parametrize("kwargs, message", [
    ({"account_id": "abc", "email_address": "george@example.com"}, "both given"),
    ({}, "none given"),
])
def test_add_user_needs_exactly_one_identifier(client, session, kwargs, message):
    with pytest.raises(ValidationError, match=message):
        client.add_user(**kwargs)

    session.request.assert_not_called()
