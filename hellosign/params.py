"""Option objects sent to the HelloSign API, marshaled by :mod:`hellosign.marshaler`."""
import json
from enum import Enum
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, EmailStr, field_validator, model_validator

from hellosign.marshaler import form_field

DOCUMENT_SOURCES = ("file", "file_url", "file_io")


def _label(source: str) -> str:
    return source.replace("_", " ")


class FormParams(BaseModel):
    """Base for option objects."""
    model_config = ConfigDict(arbitrary_types_allowed=True)


class ListParams(FormParams):
    """Options shared by every list endpoint."""
    account_id: Optional[str] = form_field(omit_empty=True)
    page: Optional[int] = form_field(omit_empty=True)
    page_size: Optional[int] = form_field(omit_empty=True)
    query: Optional[str] = form_field(omit_empty=True)


class FileParams(FormParams):
    file_type: str = form_field("", omit_empty=True)
    get_url: bool = form_field(False, omit_empty=True)

    @field_validator("file_type")
    @classmethod
    def file_type_must_be_known(cls, value: str) -> str:
        if value not in ("", "pdf", "zip"):
            raise ValueError("Invalid file type specified, pdf or zip")
        return value


class DocumentSourceParams(FormParams):
    """Documents given either as contents, as URLs, or as readable file objects."""
    file: List[bytes] = form_field(default_factory=list, omit_empty=True)
    file_url: List[str] = form_field(default_factory=list, omit_empty=True)
    file_io: List[Any] = form_field(default_factory=list, exclude=True)

    @model_validator(mode="after")
    def exactly_one_document_source(self):
        given = [source for source in DOCUMENT_SOURCES if getattr(self, source)]
        if not given:
            raise ValueError("Specify either file, file io or file url, none given")
        if len(given) > 1:
            raise ValueError(f"Specify either {_label(given[0])} or {_label(given[1])}, both given")
        return self

    def with_files_read(self):
        """Return a copy where every ``file_io`` object has been read into ``file``."""
        if not self.file_io:
            return self
        contents = []
        for file_obj in self.file_io:
            content = file_obj.read()
            if isinstance(content, str):
                content = content.encode("utf-8")
            contents.append(content)
        return self.model_copy(update={"file": contents, "file_io": []})


# Account, team and template membership

class CallbackUrlParams(FormParams):
    callback_url: str = form_field(...)


class EmailAddressParams(FormParams):
    email_address: EmailStr = form_field(...)


class NameParams(FormParams):
    name: str = form_field(...)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name must not be empty")
        return value.strip()


class MemberParams(FormParams):
    """A user given either by account id or by email address."""
    account_id: Optional[str] = form_field(omit_empty=True)
    email_address: Optional[EmailStr] = form_field(omit_empty=True)

    @model_validator(mode="after")
    def exactly_one_identifier(self):
        if self.account_id and self.email_address:
            raise ValueError("Specify either account id or email address, both given")
        if not self.account_id and not self.email_address:
            raise ValueError("Specify either account id or email address, none given")
        return self


# Signature requests

class SignerParams(FormParams):
    name: str = form_field(...)
    email_address: EmailStr = form_field(...)
    order: Optional[int] = form_field()
    pin: Optional[str] = form_field(omit_empty=True)

    @field_validator("pin")
    @classmethod
    def pin_length(cls, value: Optional[str]) -> Optional[str]:
        if value and not 4 <= len(value) <= 12:
            raise ValueError("Pin must be between 4 and 12 characters long")
        return value


class TemplateSignerParams(FormParams):
    name: str = form_field(...)
    email_address: EmailStr = form_field(...)
    pin: Optional[str] = form_field(omit_empty=True)


class TemplateCCParams(FormParams):
    email_address: EmailStr = form_field(...)


class SignatureRequestSendParams(DocumentSourceParams):
    test_mode: bool = form_field(False, omit_empty=True)
    allow_decline: bool = form_field(False, omit_empty=True)
    title: str = form_field("", omit_empty=True)
    subject: str = form_field("", omit_empty=True)
    message: str = form_field("", omit_empty=True)
    signing_redirect_url: str = form_field("", omit_empty=True)
    signers: List[SignerParams] = form_field(...)
    cc_email_addresses: List[EmailStr] = form_field(default_factory=list, omit_empty=True)
    use_text_tags: bool = form_field(False, omit_empty=True)
    hide_text_tags: bool = form_field(False, omit_empty=True)
    metadata: Dict[str, str] = form_field(default_factory=dict, omit_empty=True)
    client_id: str = form_field("", omit_empty=True)
    form_fields_per_document: str = form_field("", omit_empty=True)


class SignatureRequestEmbeddedParams(SignatureRequestSendParams):
    client_id: str = form_field(...)


class SignatureRequestTemplateParams(FormParams):
    test_mode: bool = form_field(False, omit_empty=True)
    allow_decline: bool = form_field(False, omit_empty=True)
    template_id: str = form_field("", omit_empty=True)
    template_ids: List[str] = form_field(default_factory=list, omit_empty=True)
    title: str = form_field("", omit_empty=True)
    subject: str = form_field("", omit_empty=True)
    message: str = form_field("", omit_empty=True)
    signing_redirect_url: str = form_field("", omit_empty=True)
    # keyed by signer role
    signers: Dict[str, TemplateSignerParams] = form_field(...)
    ccs: Dict[str, TemplateCCParams] = form_field(default_factory=dict, omit_empty=True)
    custom_fields: Union[str, List[Dict[str, Any]]] = form_field("", omit_empty=True)
    metadata: Dict[str, str] = form_field(default_factory=dict, omit_empty=True)
    client_id: str = form_field("", omit_empty=True)

    @field_validator("custom_fields")
    @classmethod
    def custom_fields_as_json(cls, value: Union[str, List[Dict[str, Any]]]) -> str:
        # the API takes custom fields as one JSON encoded string
        if isinstance(value, list):
            return json.dumps(value) if value else ""
        return value

    @model_validator(mode="after")
    def exactly_one_template(self):
        if not self.template_id and not self.template_ids:
            raise ValueError("Specify either template id or template ids, none given")
        if self.template_id and self.template_ids:
            raise ValueError("Specify either template id or template ids, both given")
        return self


class SignatureRequestEmbeddedTemplateParams(SignatureRequestTemplateParams):
    client_id: str = form_field(...)


class ReminderParams(FormParams):
    email_address: EmailStr = form_field(...)
    name: Optional[str] = form_field(omit_empty=True)


class SignatureUpdateParams(FormParams):
    signature_id: str = form_field(...)
    email_address: EmailStr = form_field(...)


# Templates

class SignerRoleParams(FormParams):
    name: str = form_field(...)
    order: Optional[int] = form_field()


class MergeFieldParams(FormParams):
    name: str = form_field(...)
    type: str = form_field(...)

    @field_validator("type")
    @classmethod
    def type_must_be_known(cls, value: str) -> str:
        if value not in ("text", "checkbox"):
            raise ValueError("Merge field type must be text or checkbox")
        return value


class TemplateEmbeddedDraftParams(DocumentSourceParams):
    test_mode: bool = form_field(False, omit_empty=True)
    client_id: str = form_field(...)
    title: str = form_field("", omit_empty=True)
    subject: str = form_field("", omit_empty=True)
    message: str = form_field("", omit_empty=True)
    signer_roles: List[SignerRoleParams] = form_field(default_factory=list, omit_empty=True)
    cc_roles: List[str] = form_field(default_factory=list, omit_empty=True)
    merge_fields: List[MergeFieldParams] = form_field(default_factory=list, omit_empty=True)
    metadata: Dict[str, str] = form_field(default_factory=dict, omit_empty=True)


# API apps

class ApiAppOauthParams(FormParams):
    callback_url: str = form_field("", omit_empty=True)
    scopes: List[str] = form_field(default_factory=list, omit_empty=True)


class ApiAppUpdateParams(FormParams):
    name: str = form_field("", omit_empty=True)
    domain: str = form_field("", omit_empty=True)
    callback_url: str = form_field("", omit_empty=True)
    custom_logo_file: Optional[bytes] = form_field(omit_empty=True)
    oauth: Optional[ApiAppOauthParams] = form_field(omit_empty=True)
    white_labeling_options: Union[str, Dict[str, Any]] = form_field("", omit_empty=True)

    @field_validator("white_labeling_options")
    @classmethod
    def white_labeling_as_json(cls, value: Union[str, Dict[str, Any]]) -> str:
        if isinstance(value, dict):
            return json.dumps(value) if value else ""
        return value


class ApiAppCreateParams(ApiAppUpdateParams):
    name: str = form_field(...)
    domain: str = form_field(...)


# Unclaimed drafts

class UnclaimedDraftType(str, Enum):
    SEND_DOCUMENT = "send_document"
    REQUEST_SIGNATURE = "request_signature"


class UnclaimedDraftParams(DocumentSourceParams):
    test_mode: bool = form_field(False, omit_empty=True)
    type: UnclaimedDraftType = form_field(UnclaimedDraftType.SEND_DOCUMENT)
    subject: str = form_field("", omit_empty=True)
    message: str = form_field("", omit_empty=True)
    signers: List[SignerParams] = form_field(default_factory=list, omit_empty=True)
    cc_email_addresses: List[EmailStr] = form_field(default_factory=list, omit_empty=True)
    signing_redirect_url: str = form_field("", omit_empty=True)
    use_text_tags: bool = form_field(False, omit_empty=True)
    hide_text_tags: bool = form_field(False, omit_empty=True)
    metadata: Dict[str, str] = form_field(default_factory=dict, omit_empty=True)
    form_fields_per_document: str = form_field("", omit_empty=True)

    @model_validator(mode="after")
    def signers_for_signature_requests(self):
        if self.type == UnclaimedDraftType.REQUEST_SIGNATURE and not self.signers:
            raise ValueError("A request_signature draft needs at least one signer")
        return self


class UnclaimedDraftEmbeddedParams(UnclaimedDraftParams):
    client_id: str = form_field(...)
    requester_email_address: EmailStr = form_field(...)
    is_for_embedded_signing: bool = form_field(False, omit_empty=True)
    requesting_redirect_url: str = form_field("", omit_empty=True)
