"""Project writer: persists rendered files under the project directory."""

from pathlib import Path

import click

from api_scaffold.generator.renderer import RenderedProject

MANIFEST_FILENAME = "Cargo.toml"
SOURCE_DIR = "src"
SOURCE_FILENAME = "main.rs"
SOURCE_PATH = f"{SOURCE_DIR}/{SOURCE_FILENAME}"


class ProjectWriter:
    """Writes a ``RenderedProject`` to ``<base_dir>/<project_name>/``."""

    def __init__(self, base_dir: str | Path = "."):
        self.base_dir = Path(base_dir)

    def write(self, project_name: str, rendered: RenderedProject) -> Path:
        """Create the project tree and write both files, overwriting old ones.

        Raises OSError if a directory or file cannot be created.
        """
        project_dir = self.base_dir / project_name
        src_dir = project_dir / SOURCE_DIR
        src_dir.mkdir(parents=True, exist_ok=True)

        (project_dir / MANIFEST_FILENAME).write_text(rendered.manifest, encoding="utf-8")
        (src_dir / SOURCE_FILENAME).write_text(rendered.source, encoding="utf-8")

        click.echo(f"Project '{project_name}' created successfully!")
        return project_dir
