"""Data models describing the project the user asked for.

The collector builds these incrementally from prompt answers and hands a
finished ``ProjectModel`` to the renderer. Nothing mutates them afterwards.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class ApiStyle(str, Enum):
    """The API flavour of the generated project."""

    REST = "REST"
    GRAPHQL = "GraphQL"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class SchemaKind(str, Enum):
    QUERY = "Query"
    MUTATION = "Mutation"

    @classmethod
    def parse(cls, text: str) -> "SchemaKind":
        """Normalize free text like ``query`` or ``MUTATION`` to a kind."""
        wanted = text.strip().lower()
        for kind in cls:
            if kind.value.lower() == wanted:
                return kind
        raise ValueError(f"Unknown schema type: {text!r} (expected Query or Mutation)")


class Endpoint(BaseModel):
    """A single (path, method) pair that becomes one REST handler."""

    model_config = ConfigDict(frozen=True)

    path: str  # /users
    method: HttpMethod

    @field_validator("path")
    @classmethod
    def _path_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("path must not be empty")
        return value


class SchemaField(BaseModel):
    """A single GraphQL field that becomes one resolver."""

    model_config = ConfigDict(frozen=True)

    name: str  # getUser
    kind: SchemaKind

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("name must not be empty")
        return value


class ProjectModel(BaseModel):
    """Everything needed to render a project skeleton."""

    model_config = ConfigDict(frozen=True)

    project_name: str
    style: ApiStyle
    endpoints: tuple[Endpoint, ...] = ()
    schemas: tuple[SchemaField, ...] = ()

    @field_validator("project_name")
    @classmethod
    def _project_name_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("project_name must not be empty")
        return value

    @model_validator(mode="after")
    def _check_style_payload(self) -> "ProjectModel":
        if self.style is ApiStyle.REST and self.schemas:
            raise ValueError("REST projects cannot carry GraphQL schemas")
        if self.style is ApiStyle.GRAPHQL and self.endpoints:
            raise ValueError("GraphQL projects cannot carry REST endpoints")
        return self
