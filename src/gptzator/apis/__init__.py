"""Resource facades, one class per group of remote endpoints."""

from .apps import AppsApi
from .assistants import AssistantsApi, ThreadAssistantApi
from .base import ResourceApi
from .catalog import ApiTemplatesApi, FilesApi, InvitesApi, ModelsApi, SubscribesApi
from .projects import ProjectsApi
from .threads import ThreadsApi
from .users import UserApi
from .vaults import VaultsApi
from .workspaces import SourcesApi, WorkspacesApi

__all__ = [
    "ApiTemplatesApi",
    "AppsApi",
    "AssistantsApi",
    "FilesApi",
    "InvitesApi",
    "ModelsApi",
    "ProjectsApi",
    "ResourceApi",
    "SourcesApi",
    "SubscribesApi",
    "ThreadAssistantApi",
    "ThreadsApi",
    "UserApi",
    "VaultsApi",
    "WorkspacesApi",
]
