import pytest

from api_scaffold.generator.renderer import RenderedProject
from api_scaffold.writer import ProjectWriter

FILES = RenderedProject(manifest='[package]\nname = "demo"\n', source="fn main() {}\n")


class TestProjectWriter:
    def test_writes_layout(self, tmp_path, capsys):
        project_dir = ProjectWriter(tmp_path).write("demo", FILES)

        assert project_dir == tmp_path / "demo"
        assert (project_dir / "Cargo.toml").read_text(encoding="utf-8") == FILES.manifest
        assert (project_dir / "src" / "main.rs").read_text(encoding="utf-8") == FILES.source
        assert "Project 'demo' created successfully!" in capsys.readouterr().out

    def test_existing_directory_is_reused(self, tmp_path):
        (tmp_path / "demo" / "src").mkdir(parents=True)
        (tmp_path / "demo" / "README.md").write_text("keep me")

        ProjectWriter(tmp_path).write("demo", FILES)

        assert (tmp_path / "demo" / "README.md").read_text() == "keep me"
        assert (tmp_path / "demo" / "Cargo.toml").exists()

    def test_second_write_overwrites(self, tmp_path):
        writer = ProjectWriter(tmp_path)
        writer.write("demo", FILES)
        second = RenderedProject(manifest='[package]\nname = "demo2"\n', source="// v2\n")
        writer.write("demo", second)

        assert (tmp_path / "demo" / "Cargo.toml").read_text(encoding="utf-8") == second.manifest
        assert (tmp_path / "demo" / "src" / "main.rs").read_text(encoding="utf-8") == second.source

    def test_blocked_path_raises(self, tmp_path):
        (tmp_path / "demo").write_text("a file, not a directory")
        with pytest.raises(OSError):
            ProjectWriter(tmp_path).write("demo", FILES)
