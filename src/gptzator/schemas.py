"""Typed payloads returned by the remote platform API.

Models accept unknown fields so new server attributes never break parsing,
and read the server's camelCase keys into snake_case attributes.
"""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):
    """Lenient base model with camelCase aliases."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, alias_generator=to_camel)

    def to_payload(self) -> dict[str, Any]:
        """Dump using wire field names, dropping unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Collection(ApiModel, Generic[T]):
    """Paginated collection envelope."""

    docs: list[T] = Field(default_factory=list)
    total_docs: int = 0
    limit: int | None = None
    total_pages: int | None = None
    page: int | None = None
    paging_counter: int | None = None
    has_prev_page: bool | None = None
    has_next_page: bool | None = None
    prev_page: int | None = None
    next_page: int | None = None


class Tag(ApiModel):
    id: str
    name: str
    created_at: str | None = None
    updated_at: str | None = None


# Models / LLMs


class Model(ApiModel):
    id: str
    name: str | None = None
    code_id: str | None = None
    vendor: str | None = None
    description: str | None = None
    active: bool | None = None


class LlmModel(Model):
    pass


class EmbeddingModel(Model):
    pass


# Users


class Organization(ApiModel):
    id: str
    name: str | None = None


class UserAvatar(ApiModel):
    id: str
    url: str | None = None


class User(ApiModel):
    id: str
    email: str | None = None
    role: str | None = None
    type: str | None = None
    balance: str | float | None = None
    is_internal: bool | None = None
    policy: bool | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    purchased_tokens: float | None = None
    free_tokens: float | None = None
    onboarded: dict[str, bool] | None = None
    default_model: Model | str | None = None
    default_thread_model: Model | str | None = None
    avatar: UserAvatar | str | None = None
    organization: Organization | str | None = None
    is_org_manager: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None


class AuthResult(ApiModel):
    """Login/signup result; the token is also stored in the client."""

    user: User | None = None
    token: str


# Apps


class Action(ApiModel):
    id: str
    block_name: str | None = None
    block_type: str | None = None
    model: str | None = None
    prompt: str | None = None
    slug: str | None = None
    type: str | None = None
    next_slug: str | None = None
    item_slug: str | None = None
    is_hidden: bool | None = None
    description: str | None = None


class App(ApiModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    description_small: str | None = None
    placeholder: str | None = None
    imageurl: str | None = None
    is_favourite: bool | None = None
    is_private: bool | None = None
    tags: list[Any] | None = None
    actions: list[Action | str] | None = None
    author: Any | None = None
    demo_project: Any | None = None
    approximate_cost: float | None = None
    emoji: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class OauthClient(ApiModel):
    id: str
    name: str | None = None
    type: str | None = None
    code: str | None = None
    has_logged: bool | None = None
    url: str | None = None


class AppsMenuItem(ApiModel):
    id: str
    type: Literal["group", "action"] | str
    name: str | None = None
    icon_url: str | None = None
    description: str | None = None
    children: list[AppsMenuItem] | None = None
    action: Action | None = None
    is_selected: bool | None = None


class SettingsTemplate(ApiModel):
    id: str
    author: Any | None = None
    app: Any | None = None
    name: str | None = None
    values: dict[str, Any] | None = None
    is_default: bool | None = None
    is_private: bool | None = None
    is_active: bool | None = None


# Projects


class Application(ApiModel):
    id: str
    name: str | None = None
    actions: list[Action | str] | None = None
    emoji: str | None = None


class Artefact(ApiModel):
    id: str
    name: str | None = None
    data: Any | None = None
    slug: str | None = None
    next_slug: str | None = None
    item_slug: str | None = None
    completion_tokens: int | None = Field(default=None, alias="completion_tokens")
    prompt_tokens: int | None = Field(default=None, alias="prompt_tokens")
    metadata: dict[str, Any] | None = None


class Project(ApiModel):
    """Project state; ``generating``/``last_generation_error``/``error`` drive polling."""

    id: str
    name: str | None = None
    idea: str | None = None
    generating: bool = False
    application: Application | str | None = None
    actions: list[Action | str] | None = None
    is_error: bool | None = None
    last_generation_error: str | None = None
    error: Any | None = None
    artefacts: list[Artefact] = Field(default_factory=list)
    is_demo: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None


# Threads and messages


class MessageChoice(ApiModel):
    id: str | None = None
    type: str | None = None
    content: str | None = None
    annotations: dict[str, str] | None = None


class Message(ApiModel):
    id: str
    type: str | None = None
    choices: list[MessageChoice] = Field(default_factory=list)
    file: dict[str, Any] | None = None
    user_avatar: str | None = None


class GenerationType(ApiModel):
    id: str
    type: str | None = None
    name: str | None = None


class Vault(ApiModel):
    id: str
    name: str | None = None
    type: str | None = None
    description: str | None = None
    llm_instructions: str | None = Field(default=None, alias="llm_instructions")
    data_title: str | None = Field(default=None, alias="data_title")
    value_title: str | None = None
    instructions: str | None = None
    applications_to_launch: list[str] | None = None
    is_favorite: bool | None = None
    logo: str | None = None
    author: Any | None = None
    tags: list[Any] | None = None
    value: str | None = None
    embedding_settings: dict[str, Any] | None = None
    created_at: str | None = None
    updated_at: str | None = None


class Thread(ApiModel):
    id: str
    title: str | None = None
    status: str | None = None
    latest_error: str | None = None
    generation_type: GenerationType | str | None = None
    model: Model | str | None = None
    vault: list[Vault | str] | None = None
    created_at: str | None = None
    updated_at: str | None = None


# Assistants


class AssistantMode(ApiModel):
    id: str
    name: str | None = None
    instructions: Any | None = None
    is_default: bool | None = None
    is_selected: bool | None = None
    llm: dict[str, Any] | None = None
    rag: dict[str, Any] | None = None
    apps: dict[str, Any] | None = None


class Assistant(ApiModel):
    id: str
    name: str | None = None
    description: str | None = None
    image: dict[str, Any] | None = None
    scope: str | None = None
    is_default: bool | None = None
    author: Any | None = None
    can_edit: bool | None = None
    welcome_message: str | None = None
    modes: list[AssistantMode] = Field(default_factory=list)
    workspace_ids: list[str] = Field(default_factory=list)
    ctx: dict[str, Any] | None = None
    created_at: str | None = None
    updated_at: str | None = None


class AssistantList(ApiModel):
    assistants: list[Assistant] = Field(default_factory=list)


class AssistantThread(ApiModel):
    id: str
    name: str | None = None
    title: str | None = None
    author: Any | None = None
    assistant: dict[str, Any] | str | None = None
    status: str | None = None
    type: str | None = None
    latest_error: str | None = None
    workspaces: list[Any] | None = None
    scope: str | None = None
    mode: dict[str, Any] | str | None = None
    created_at: str | None = None
    updated_at: str | None = None


# Workspaces and sources


class Workspace(ApiModel):
    id: str
    author: Any | None = None
    name: str | None = None
    description: str | None = None
    instructions: str | None = None
    sources: dict[str, Any] | None = None
    spaces: dict[str, Any] | None = None


class WorkspaceList(ApiModel):
    workspaces: list[Workspace] = Field(default_factory=list)


class WorkspaceTree(ApiModel):
    sources: list[dict[str, Any]] = Field(default_factory=list)
    spaces: list[Any] = Field(default_factory=list)
    workspace: dict[str, Any] | None = None


class Source(ApiModel):
    id: str
    name: str | None = None
    description: str | None = None
    type: str | None = None
    execution_status: dict[str, Any] | None = None
    file: dict[str, Any] | str | None = None


# Files, invites, templates, billing


class File(ApiModel):
    id: str
    filename: str | None = None
    mime_type: str | None = None
    filesize: int | None = None
    url: str | None = None


class Invite(ApiModel):
    id: str | None = None
    email: str | None = None
    organization: Organization | str | None = None
    created_at: str | None = None


class ApiTemplate(ApiModel):
    id: str
    name: str | None = None
    description: str | None = None


class Subscribe(ApiModel):
    id: str
    product: dict[str, Any] | str | None = None
    status: str | None = None
    created_at: str | None = None


class Product(ApiModel):
    id: str
    name: str | None = None
    price: float | None = None
    description: str | None = None


class PaymentUri(ApiModel):
    uri: str


class CouponResult(ApiModel):
    message: str | None = None
