from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SignatureStatus(str, Enum):
    """Status codes a single signature goes through."""
    AWAITING_SIGNATURE = "awaiting_signature"
    SIGNED = "signed"
    DECLINED = "declined"
    ON_HOLD = "on_hold"
    ERROR = "error"


class HelloSignModel(BaseModel):
    """Base for API response objects: unknown keys are ignored, missing keys take defaults."""
    model_config = ConfigDict(extra="ignore")


class ListInfo(HelloSignModel):
    """Paging information returned by every list endpoint."""
    page: int = 0
    num_pages: int = 0
    num_results: int = 0
    page_size: int = 0


class FormField(HelloSignModel):
    """A field in a document where some kind of action needs to be taken."""
    api_id: str = ""
    name: str = ""
    type: str = ""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    required: bool = False


class FileUrl(HelloSignModel):
    """A download link for the files of a request or template."""
    file_url: str = ""
    expires_at: int = 0


class EmbeddedUrl(HelloSignModel):
    """An URL to open in an iFrame, with an expiration time."""
    sign_url: Optional[str] = None
    edit_url: Optional[str] = None
    expires_at: int = 0


# Account

class Quotas(HelloSignModel):
    templates_left: Optional[int] = None
    api_signature_requests_left: Optional[int] = None
    documents_left: Optional[int] = None


class Account(HelloSignModel):
    """Information about an account and its settings."""
    account_id: str = ""
    email_address: str = ""
    callback_url: Optional[str] = None
    is_paid_hs: bool = False
    is_paid_hf: bool = False
    quotas: Quotas = Field(default_factory=Quotas)
    role_code: Optional[str] = None


class AccountEnvelope(HelloSignModel):
    account: Account = Field(default_factory=Account)


# Team

class TeamAccount(HelloSignModel):
    """A team member."""
    account_id: str = ""
    email_address: str = ""
    role_code: Optional[str] = None


class Team(HelloSignModel):
    """Information about your team and its members."""
    name: str = ""
    accounts: List[TeamAccount] = Field(default_factory=list)
    invited_accounts: List[TeamAccount] = Field(default_factory=list)


class TeamEnvelope(HelloSignModel):
    team: Team = Field(default_factory=Team)


# Template

class TemplateSignerRole(HelloSignModel):
    name: str = ""
    order: Optional[int] = None


class TemplateCCRole(HelloSignModel):
    name: str = ""


class TemplateCustomField(HelloSignModel):
    name: str = ""
    type: str = ""


class TemplateDocument(HelloSignModel):
    index: int = 0
    name: str = ""
    form_fields: List[FormField] = Field(default_factory=list)
    custom_fields: List[TemplateCustomField] = Field(default_factory=list)


class TemplateAccount(HelloSignModel):
    account_id: str = ""
    email_address: str = ""


class Template(HelloSignModel):
    template_id: str = ""
    title: str = ""
    message: str = ""
    signer_roles: List[TemplateSignerRole] = Field(default_factory=list)
    cc_roles: List[TemplateCCRole] = Field(default_factory=list)
    documents: List[TemplateDocument] = Field(default_factory=list)
    accounts: List[TemplateAccount] = Field(default_factory=list)
    # only set on templates created as embedded drafts
    edit_url: Optional[str] = None
    expires_at: Optional[int] = None


class TemplateEnvelope(HelloSignModel):
    template: Template = Field(default_factory=Template)


class TemplateList(HelloSignModel):
    list_info: ListInfo = Field(default_factory=ListInfo)
    templates: List[Template] = Field(default_factory=list)


# Signature request

class ResponseData(HelloSignModel):
    """A value entered by a signer."""
    api_id: str = ""
    name: Optional[str] = None
    signature_id: str = ""
    value: Any = None
    type: str = ""


class Signature(HelloSignModel):
    signature_id: str = ""
    signer_email_address: str = ""
    signer_name: str = ""
    order: Optional[int] = None
    status_code: str = ""
    signed_at: Optional[int] = None
    last_viewed_at: Optional[int] = None
    last_reminded_at: Optional[int] = None
    has_pin: bool = False

    @property
    def status(self) -> Optional[SignatureStatus]:
        try:
            return SignatureStatus(self.status_code)
        except ValueError:
            return None


class SignatureRequest(HelloSignModel):
    signature_request_id: str = ""
    title: str = ""
    subject: Optional[str] = None
    message: Optional[str] = None
    is_complete: bool = False
    is_declined: bool = False
    has_error: bool = False
    test_mode: bool = False
    custom_fields: List[Any] = Field(default_factory=list)
    response_data: List[ResponseData] = Field(default_factory=list)
    signing_url: Optional[str] = None
    signing_redirect_url: Optional[str] = None
    details_url: str = ""
    requester_email_address: str = ""
    signatures: List[Signature] = Field(default_factory=list)
    cc_email_addresses: List[str] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)


class SignatureRequestEnvelope(HelloSignModel):
    signature_request: SignatureRequest = Field(default_factory=SignatureRequest)


class SignatureRequestList(HelloSignModel):
    list_info: ListInfo = Field(default_factory=ListInfo)
    signature_requests: List[SignatureRequest] = Field(default_factory=list)


# API app

class ApiAppOauth(HelloSignModel):
    callback_url: str = ""
    scopes: List[str] = Field(default_factory=list)
    secret: str = ""


class ApiAppOwner(HelloSignModel):
    account_id: str = ""
    email_address: str = ""


class ApiApp(HelloSignModel):
    callback_url: Optional[str] = None
    client_id: str = ""
    created_at: int = 0
    domain: str = ""
    is_approved: bool = False
    name: str = ""
    oauth: Optional[ApiAppOauth] = None
    owner_account: ApiAppOwner = Field(default_factory=ApiAppOwner)


class ApiAppEnvelope(HelloSignModel):
    api_app: ApiApp = Field(default_factory=ApiApp)


class ApiAppList(HelloSignModel):
    list_info: ListInfo = Field(default_factory=ListInfo)
    api_apps: List[ApiApp] = Field(default_factory=list)


# Embedded

class EmbeddedEnvelope(HelloSignModel):
    embedded: EmbeddedUrl = Field(default_factory=EmbeddedUrl)


# Unclaimed draft

class UnclaimedDraft(HelloSignModel):
    signature_request_id: Optional[str] = None
    claim_url: str = ""
    signing_redirect_url: Optional[str] = None
    requesting_redirect_url: Optional[str] = None
    expires_at: Optional[int] = None
    test_mode: bool = False


class UnclaimedDraftEnvelope(HelloSignModel):
    unclaimed_draft: UnclaimedDraft = Field(default_factory=UnclaimedDraft)


# Callbacks

class EventType(str, Enum):
    """Event types HelloSign posts to account and app callback urls."""
    CALLBACK_TEST = "callback_test"
    SIGNATURE_REQUEST_VIEWED = "signature_request_viewed"
    SIGNATURE_REQUEST_SIGNED = "signature_request_signed"
    SIGNATURE_REQUEST_SENT = "signature_request_sent"
    SIGNATURE_REQUEST_ALL_SIGNED = "signature_request_all_signed"
    SIGNATURE_REQUEST_DECLINED = "signature_request_declined"
    SIGNATURE_REQUEST_CANCELED = "signature_request_canceled"
    SIGNATURE_REQUEST_REASSIGNED = "signature_request_reassigned"
    SIGNATURE_REQUEST_REMIND = "signature_request_remind"
    SIGNATURE_REQUEST_INVALID = "signature_request_invalid"
    SIGNATURE_REQUEST_EXPIRED = "signature_request_expired"
    SIGNATURE_REQUEST_EMAIL_BOUNCE = "signature_request_email_bounce"
    SIGNATURE_REQUEST_DOWNLOADABLE = "signature_request_downloadable"
    FILE_ERROR = "file_error"
    UNKNOWN_ERROR = "unknown_error"
    SIGN_URL_INVALID = "sign_url_invalid"
    TEMPLATE_CREATED = "template_created"
    TEMPLATE_ERROR = "template_error"
    ACCOUNT_CONFIRMED = "account_confirmed"


class EventMetadata(HelloSignModel):
    related_signature_id: Optional[str] = None
    reported_for_account_id: Optional[str] = None
    reported_for_app_id: Optional[str] = None
    event_message: Optional[str] = None


class EventInfo(HelloSignModel):
    event_time: str
    event_type: str
    event_hash: str = ""
    event_metadata: EventMetadata = Field(default_factory=EventMetadata)

    @field_validator("event_time", mode="before")
    @classmethod
    def event_time_as_string(cls, value: Any) -> str:
        # sent as a string of seconds since epoch, hashed as such
        return str(value)


class CallbackEvent(HelloSignModel):
    """An event posted by HelloSign to a callback url."""
    event: EventInfo
    account_guid: Optional[str] = None
    client_id: Optional[str] = None
    signature_request: Optional[SignatureRequest] = None
    template: Optional[Template] = None

    @property
    def event_type(self) -> str:
        return self.event.event_type

    @property
    def signature_request_id(self) -> Optional[str]:
        if self.signature_request is None:
            return None
        return self.signature_request.signature_request_id
