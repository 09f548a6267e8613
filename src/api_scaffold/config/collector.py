"""Configuration collector: asks the questions and builds a ProjectModel."""

import re
from collections.abc import Callable

import click

from api_scaffold.config.base import (
    ApiStyle,
    Endpoint,
    HttpMethod,
    ProjectModel,
    SchemaField,
    SchemaKind,
)
from api_scaffold.errors import ConfigurationError
from api_scaffold.prompt import Prompter

DEFAULT_ENDPOINT_COUNT = 2
DEFAULT_SCHEMA_COUNT = 2

API_STYLES = [style.value for style in ApiStyle]
HTTP_METHODS = [method.value for method in HttpMethod]
SCHEMA_KINDS = [kind.value for kind in SchemaKind]

IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
PROJECT_NAME_FORBIDDEN_RE = re.compile(r"[\"\\/\x00-\x1f\x7f]")
PATH_FORBIDDEN_RE = re.compile(r"[\s\"'\\]")

# Strict and reserved keywords of the generated (Rust) source.
RUST_KEYWORDS = frozenset({
    "as", "async", "await", "break", "const", "continue", "crate", "dyn", "else",
    "enum", "extern", "false", "fn", "for", "if", "impl", "in", "let", "loop",
    "match", "mod", "move", "mut", "pub", "ref", "return", "self", "Self",
    "static", "struct", "super", "trait", "true", "type", "unsafe", "use",
    "where", "while", "abstract", "become", "box", "do", "final", "macro",
    "override", "priv", "try", "typeof", "unsized", "virtual", "yield",
})


def parse_count(raw: str, default: int) -> int:
    """Coerce a count answer to a non-negative int, falling back to *default*."""
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= 0 else default


def check_path(path: str) -> str | None:
    """Return an error message if *path* cannot be embedded in a route."""
    if not path.startswith("/"):
        return "path must start with '/'"
    if PATH_FORBIDDEN_RE.search(path):
        return "path must not contain whitespace, quotes or backslashes"
    return None


def check_project_name(name: str) -> str | None:
    """Return an error message if *name* cannot be both a directory and a package name."""
    if not name.strip():
        return "must not be empty"
    if name in (".", ".."):
        return f"{name!r} is not a usable directory name"
    if PROJECT_NAME_FORBIDDEN_RE.search(name):
        return "must not contain quotes, backslashes, slashes or control characters"
    return None


def check_field_name(name: str) -> str | None:
    """Return an error message if *name* is not usable as a resolver name."""
    if not IDENTIFIER_RE.match(name):
        return "name must be letters, digits and underscores, not starting with a digit"
    if name == "_":
        return "name must contain at least one letter or digit"
    if name in RUST_KEYWORDS:
        return f"{name!r} is a reserved word"
    return None


class ConfigurationCollector:
    """Runs the fixed question sequence and assembles a ``ProjectModel``."""

    def __init__(self, project_name: str, prompter: Prompter):
        self.project_name = project_name
        self.prompter = prompter

    def collect(self) -> ProjectModel:
        style = self._ask_style()

        if style is ApiStyle.REST:
            model = ProjectModel(
                project_name=self.project_name,
                style=style,
                endpoints=tuple(self._ask_endpoints()),
            )
        elif style is ApiStyle.GRAPHQL:
            model = ProjectModel(
                project_name=self.project_name,
                style=style,
                schemas=tuple(self._ask_schemas()),
            )
        else:
            raise ConfigurationError(f"Unsupported API type: {style}")

        self._echo_summary(model)
        return model

    # -- questions ------------------------------------------------------------

    def _ask_style(self) -> ApiStyle:
        selection = self.prompter.choose(
            "What type of API do you want? (select one or more, the first one is used)",
            API_STYLES,
        )
        if not selection:
            raise ConfigurationError("No API type selected. Please choose at least one option.")
        label = selection[0]
        try:
            return ApiStyle(label)
        except ValueError:
            raise ConfigurationError(f"Unsupported API type: {label}") from None

    def _ask_endpoints(self) -> list[Endpoint]:
        count = parse_count(
            self.prompter.text(
                "How many REST endpoints do you want to create?",
                default=str(DEFAULT_ENDPOINT_COUNT),
            ),
            DEFAULT_ENDPOINT_COUNT,
        )

        endpoints = []
        for i in range(1, count + 1):
            click.echo(f"\nConfiguring Endpoint #{i}")
            path = self._ask_valid("Enter endpoint path (e.g., /users)", check_path)
            methods = self.prompter.choose("Select HTTP methods for this endpoint", HTTP_METHODS)
            # An empty selection still yields a usable endpoint.
            for method in methods or [HttpMethod.GET.value]:
                endpoints.append(Endpoint(path=path, method=HttpMethod(method)))
        return endpoints

    def _ask_schemas(self) -> list[SchemaField]:
        count = parse_count(
            self.prompter.text(
                "How many GraphQL schemas (queries/mutations) do you want to create?",
                default=str(DEFAULT_SCHEMA_COUNT),
            ),
            DEFAULT_SCHEMA_COUNT,
        )

        schemas: list[SchemaField] = []
        for i in range(1, count + 1):
            click.echo(f"\nConfiguring GraphQL Schema #{i}")
            while True:
                name = self._ask_valid("Enter schema name (e.g., getUser)", check_field_name)
                kinds = self.prompter.choose("Select schema type", SCHEMA_KINDS)
                kind = SchemaKind.parse(kinds[0]) if kinds else SchemaKind.QUERY
                field = SchemaField(name=name, kind=kind)
                if field not in schemas:
                    break
                # Resolvers of one root type share a single impl block.
                click.echo(f"Invalid value {name!r}: {kind.value} {name} is already defined", err=True)
            schemas.append(field)
        return schemas

    def _ask_valid(self, message: str, check: Callable[[str], str | None]) -> str:
        """Ask until *check* accepts the stripped answer."""
        while True:
            answer = self.prompter.text(message).strip()
            error = check(answer)
            if error is None:
                return answer
            click.echo(f"Invalid value {answer!r}: {error}", err=True)

    # -- output ---------------------------------------------------------------

    def _echo_summary(self, model: ProjectModel) -> None:
        click.echo(f"Selected API type: {model.style.value}")
        if model.style is ApiStyle.REST:
            click.echo("Configured Endpoints:")
            for endpoint in model.endpoints:
                click.echo(f"- Path: {endpoint.path}, Method: {endpoint.method.value}")
        else:
            click.echo("Configured GraphQL Schema:")
            for schema in model.schemas:
                click.echo(f"- Name: {schema.name}, Type: {schema.kind.value}")
