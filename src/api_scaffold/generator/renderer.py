"""Template renderer: turns a ProjectModel into manifest and source text.

Rendering is pure. Templates live in ``templates/`` next to this module and
receive user identifiers verbatim; validating them is the collector's job.
"""

from pathlib import Path
from typing import Any, assert_never

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from pydantic import BaseModel, ConfigDict

from api_scaffold.config.base import (
    ApiStyle,
    Endpoint,
    HttpMethod,
    ProjectModel,
    SchemaKind,
)

TEMPLATES_DIR = Path(__file__).parent / "templates"

MANIFEST_TEMPLATE = "Cargo.toml.j2"
REST_SOURCE_TEMPLATE = "rest_main.rs.j2"
GRAPHQL_SOURCE_TEMPLATE = "graphql_main.rs.j2"

PACKAGE_VERSION = "0.1.0"
RUST_EDITION = "2021"
LISTEN_ADDRESS = "127.0.0.1:8080"
GRAPHQL_PATH = "/graphql"
GRAPHIQL_PATH = "/graphiql"


class Dependency(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    spec: str  # right-hand side of the TOML assignment


REST_DEPENDENCIES = [
    Dependency(name="tide", spec='"0.16.0"'),
    Dependency(name="async-std", spec='{ version = "1.12.0", features = ["attributes"] }'),
]

GRAPHQL_DEPENDENCIES = REST_DEPENDENCIES + [
    Dependency(name="async-graphql", spec='"5.0"'),
    Dependency(name="async-graphql-tide", spec='"5.0"'),
    Dependency(name="serde", spec='{ version = "1.0", features = ["derive"] }'),
    Dependency(name="serde_json", spec='"1.0"'),
]


class RenderedProject(BaseModel):
    """The two generated files, as text."""

    model_config = ConfigDict(frozen=True)

    manifest: str
    source: str


class TemplateRenderer:
    """Renders the Cargo manifest and ``main.rs`` for a project model."""

    def __init__(self, template_dir: str | Path | None = None):
        self.template_dir = Path(template_dir) if template_dir else TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, model: ProjectModel) -> RenderedProject:
        return RenderedProject(
            manifest=self.render_manifest(model),
            source=self.render_source(model),
        )

    def render_manifest(self, model: ProjectModel) -> str:
        return self._render(MANIFEST_TEMPLATE, {
            "project_name": model.project_name,
            "version": PACKAGE_VERSION,
            "edition": RUST_EDITION,
            "dependencies": dependencies_for(model.style),
        })

    def render_source(self, model: ProjectModel) -> str:
        context: dict[str, Any] = {
            "address": LISTEN_ADDRESS,
            "endpoints": self.endpoints_for(model),
        }
        if model.style is ApiStyle.REST:
            return self._render(REST_SOURCE_TEMPLATE, context)
        elif model.style is ApiStyle.GRAPHQL:
            context.update(
                queries=[f for f in model.schemas if f.kind is SchemaKind.QUERY],
                mutations=[f for f in model.schemas if f.kind is SchemaKind.MUTATION],
                graphql_path=GRAPHQL_PATH,
                explorer_path=GRAPHIQL_PATH,
            )
            return self._render(GRAPHQL_SOURCE_TEMPLATE, context)
        else:
            assert_never(model.style)

    @staticmethod
    def endpoints_for(model: ProjectModel) -> list[Endpoint]:
        """Routes the generated server registers for user-defined handlers.

        GraphQL projects get one synthetic ``POST /graphql`` route.
        """
        if model.style is ApiStyle.REST:
            return list(model.endpoints)
        elif model.style is ApiStyle.GRAPHQL:
            return [Endpoint(path=GRAPHQL_PATH, method=HttpMethod.POST)]
        else:
            assert_never(model.style)

    def _render(self, template_name: str, context: dict[str, Any]) -> str:
        return self.env.get_template(template_name).render(**context)


def dependencies_for(style: ApiStyle) -> list[Dependency]:
    """Crate dependencies pinned for *style*."""
    if style is ApiStyle.REST:
        return list(REST_DEPENDENCIES)
    elif style is ApiStyle.GRAPHQL:
        return list(GRAPHQL_DEPENDENCIES)
    else:
        assert_never(style)
