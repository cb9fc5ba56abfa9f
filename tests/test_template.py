# tests/test_template.py
"""
Tests for template endpoints.
"""
import pytest
from pydantic import ValidationError

from conftest import API_KEY, TEMPLATE
from hellosign import TemplateAPI
from hellosign.params import ListParams, MergeFieldParams, SignerRoleParams, TemplateEmbeddedDraftParams

TEMPLATE_ID = TEMPLATE["template_id"]


@pytest.fixture
def client(session):
    return TemplateAPI(API_KEY, session=session)


def test_fetches_a_template(client, respond, sent):
    respond(200, {"template": TEMPLATE})

    template = client.get(TEMPLATE_ID)

    _, url, _ = sent()
    assert url == f"https://api.hellosign.com/v3/template/{TEMPLATE_ID}"
    assert template.title == "Mutual NDA"
    assert [role.name for role in template.signer_roles] == ["Client", "Witness"]
    assert template.cc_roles[0].name == "Lawyer"
    form_field = template.documents[0].form_fields[0]
    assert (form_field.api_id, form_field.width, form_field.required) == ("uniq1", 120, True)
    assert template.documents[0].custom_fields[0].name == "Company"


def test_lists_templates(client, respond, sent):
    respond(200, {
        "list_info": {"page": 2, "num_pages": 3, "num_results": 41, "page_size": 20},
        "templates": [TEMPLATE],
    })

    templates = client.list(ListParams(page=2, page_size=20, query="title:NDA"))

    _, url, kwargs = sent()
    assert url == "https://api.hellosign.com/v3/template/list"
    assert kwargs["params"] == [("page", "2"), ("page_size", "20"), ("query", "title:NDA")]
    assert templates.list_info.num_results == 41
    assert templates.templates[0].template_id == TEMPLATE_ID


def test_lists_without_params(client, respond, sent):
    respond(200, {"list_info": {}, "templates": []})

    templates = client.list()

    _, _, kwargs = sent()
    assert "params" not in kwargs
    assert templates.templates == []


def test_adds_and_removes_users(client, respond, sent, sent_form):
    respond(200, {"template": TEMPLATE})

    client.add_user(TEMPLATE_ID, email_address="george@example.com")
    _, url, _ = sent()
    assert url == f"https://api.hellosign.com/v3/template/add_user/{TEMPLATE_ID}"
    assert sent_form() == {"email_address": "george@example.com"}

    client.remove_user(TEMPLATE_ID, account_id="abc")
    _, url, _ = sent()
    assert url == f"https://api.hellosign.com/v3/template/remove_user/{TEMPLATE_ID}"
    assert sent_form() == {"account_id": "abc"}


def test_add_user_rejects_both_identifiers(client, session):
    with pytest.raises(ValidationError, match="both given"):
        client.add_user(TEMPLATE_ID, account_id="abc", email_address="george@example.com")

    session.request.assert_not_called()


def test_downloads_files(client, respond, sent):
    respond(200, content=b"PK\x03\x04")

    content = client.files(TEMPLATE_ID, "zip")

    _, url, kwargs = sent()
    assert url == f"https://api.hellosign.com/v3/template/files/{TEMPLATE_ID}"
    assert kwargs["params"] == [("file_type", "zip")]
    assert content == b"PK\x03\x04"


def test_deletes_a_template(client, respond, sent):
    respond(200, {})

    assert client.delete(TEMPLATE_ID) is True

    method, url, _ = sent()
    assert (method, url) == ("POST", f"https://api.hellosign.com/v3/template/delete/{TEMPLATE_ID}")


def test_creates_an_embedded_draft(client, respond, sent, sent_form):
    respond(200, {"template": {
        "template_id": TEMPLATE_ID,
        "edit_url": "https://embedded.hellosign.com/prep-and-send/embedded-template?cached_params_token=abc",
        "expires_at": 1414093536,
    }})
    params = TemplateEmbeddedDraftParams(
        test_mode=True,
        client_id="0dd3b823a682527788c4e40cb7b6f7e9",
        file=[b"%PDF-1.4"],
        title="Test Template",
        signer_roles=[SignerRoleParams(name="Client", order=0), SignerRoleParams(name="Witness", order=1)],
        cc_roles=["Manager"],
        merge_fields=[MergeFieldParams(name="Full Name", type="text")],
    )

    template = client.create_embedded_draft(params)

    _, url, kwargs = sent()
    assert url == "https://api.hellosign.com/v3/template/create_embedded_draft"
    assert sent_form() == {
        "test_mode": "1",
        "client_id": "0dd3b823a682527788c4e40cb7b6f7e9",
        "title": "Test Template",
        "signer_roles[0][name]": "Client",
        "signer_roles[0][order]": "0",
        "signer_roles[1][name]": "Witness",
        "signer_roles[1][order]": "1",
        "cc_roles[0]": "Manager",
        "merge_fields[0][name]": "Full Name",
        "merge_fields[0][type]": "text",
    }
    assert kwargs["files"] == [("file[0]", ("Document 0", b"%PDF-1.4", "application/octet-stream"))]
    assert template.edit_url.startswith("https://embedded.hellosign.com/")
    assert template.expires_at == 1414093536


@pytest.mark.parametrize("documents, message", [
    ({}, "none given"),
    ({"file": [b"pdf"], "file_url": ["https://example.com/a.pdf"]}, "both given"),
])
def test_embedded_draft_needs_exactly_one_document_source(documents, message):
    with pytest.raises(ValidationError, match=message):
        TemplateEmbeddedDraftParams(client_id="0dd3b823a682527788c4e40cb7b6f7e9", **documents)
