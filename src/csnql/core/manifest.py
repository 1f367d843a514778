import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ManifestError

MANIFEST_FILE = "csnql.toml"
_DEFAULT_SCHEMA_PATH = "gen/csn.json"


@dataclass
class SchemaConfig:
    """Location of the compiled CSN document."""

    path: str = _DEFAULT_SCHEMA_PATH  # relative to the manifest directory


@dataclass
class ProjectManifest:
    name: str
    version: str
    project_root: Path
    schema: SchemaConfig = field(default_factory=SchemaConfig)

    @property
    def schema_path(self) -> Path:
        """Absolute path of the CSN document."""
        return self.project_root / self.schema.path


def load_manifest(path: Path) -> ProjectManifest:
    path = Path(path)
    if not path.is_file():
        raise ManifestError(f"No {MANIFEST_FILE} found at {path}")

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e

    project = data.get("project", {})
    if not isinstance(project, dict):
        raise ManifestError(f"[project] must be a table in {path}")
    schema_data = data.get("schema", {})
    if not isinstance(schema_data, dict):
        raise ManifestError(f"[schema] must be a table in {path}")

    schema_path = schema_data.get("path", _DEFAULT_SCHEMA_PATH)
    if not isinstance(schema_path, str):
        raise ManifestError(f"[schema] path must be a string in {path}")

    return ProjectManifest(
        name=project.get("name", path.parent.name),
        version=project.get("version", "0.0.0"),
        project_root=path.parent.resolve(),
        schema=SchemaConfig(path=schema_path),
    )
