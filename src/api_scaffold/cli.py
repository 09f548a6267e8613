"""CLI entry point for api-scaffold."""

import click

from api_scaffold.config.collector import ConfigurationCollector, check_project_name
from api_scaffold.errors import ScaffoldError
from api_scaffold.generator.renderer import TemplateRenderer
from api_scaffold.generator.validator import validate_project
from api_scaffold.prompt import ClickPrompter
from api_scaffold.writer import ProjectWriter

__version__ = "0.1.0"


def _project_name(ctx: click.Context, param: click.Parameter, value: str) -> str:
    error = check_project_name(value)
    if error:
        raise click.BadParameter(error)
    return value


@click.command()
@click.version_option(version=__version__, prog_name="api-scaffold")
@click.argument("project_name", callback=_project_name)
def main(project_name: str):
    """Scaffold a REST or GraphQL web service named PROJECT_NAME."""
    # Step 1: Collect
    collector = ConfigurationCollector(project_name, ClickPrompter())
    model = collector.collect()

    # Step 2: Render
    rendered = TemplateRenderer().render(model)
    errors = validate_project(project_name, rendered)
    if errors:
        details = "; ".join(f"{name}: {msg}" for name, msg in errors.items())
        raise ScaffoldError(f"Generated files failed validation: {details}")

    # Step 3: Write
    try:
        ProjectWriter().write(project_name, rendered)
    except OSError as e:
        raise ScaffoldError(f"Failed to create project: {e}") from e
