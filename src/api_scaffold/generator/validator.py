"""Validates rendered project files for structural correctness."""

import tomllib

from api_scaffold.generator.renderer import RenderedProject
from api_scaffold.writer import MANIFEST_FILENAME, SOURCE_PATH

BRACKET_PAIRS = {"}": "{", ")": "(", "]": "["}


def validate_manifest(manifest: str, project_name: str) -> str | None:
    """Check the manifest parses as TOML and names the project.

    Returns an error message, or None if the manifest is fine.
    """
    try:
        data = tomllib.loads(manifest)
    except tomllib.TOMLDecodeError as e:
        return f"TOMLDecodeError: {e}"

    package = data.get("package")
    if not isinstance(package, dict):
        return "missing [package] table"
    if package.get("name") != project_name:
        return f"package name is {package.get('name')!r}, expected {project_name!r}"
    if not isinstance(data.get("dependencies"), dict):
        return "missing [dependencies] table"
    return None


def validate_source(source: str) -> str | None:
    """Check the source is non-empty and its brackets balance.

    String literals are skipped so user paths cannot unbalance the count.
    """
    if not source.strip():
        return "source is empty"

    stack: list[str] = []
    in_string = False
    escaped = False
    for lineno, line in enumerate(source.splitlines(), start=1):
        for char in line:
            if in_string:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == '"':
                    in_string = False
                continue
            if char == '"':
                in_string = True
            elif char in "{([":
                stack.append(char)
            elif char in BRACKET_PAIRS:
                if not stack or stack.pop() != BRACKET_PAIRS[char]:
                    return f"unbalanced {char!r} (line {lineno})"
    if in_string:
        return "unterminated string literal"
    if stack:
        return f"unclosed {stack[-1]!r}"
    return None


def validate_project(project_name: str, rendered: RenderedProject) -> dict[str, str]:
    """Run all validations on a rendered project.

    Returns dict of {filename: error_message} for files with errors.
    """
    errors = {}
    manifest_error = validate_manifest(rendered.manifest, project_name)
    if manifest_error:
        errors[MANIFEST_FILENAME] = manifest_error
    source_error = validate_source(rendered.source)
    if source_error:
        errors[SOURCE_PATH] = source_error
    return errors
