"""SARIF 2.1.0 report models and encoder.

INVARIANT: Every lintkit tool reports through :class:`SarifLog`.
Field declaration order is the serialized order; unset optional fields are
omitted, so encoding the same log twice yields identical bytes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

VERSION = "2.1.0"
SCHEMA_URI = "https://json.schemastore.org/sarif-2.1.0.json"

LEVEL_ERROR = "error"
LEVEL_WARNING = "warning"
LEVEL_NOTE = "note"


class _SarifModel(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}


class Driver(_SarifModel):
    """The tool's identity."""

    name: str
    version: str | None = None
    information_uri: str | None = Field(default=None, alias="informationUri")


class Tool(_SarifModel):
    driver: Driver


class Message(_SarifModel):
    text: str


class ArtifactLocation(_SarifModel):
    uri: str


class Region(_SarifModel):
    start_line: int | None = Field(default=None, alias="startLine")
    start_column: int | None = Field(default=None, alias="startColumn")
    end_line: int | None = Field(default=None, alias="endLine")
    end_column: int | None = Field(default=None, alias="endColumn")


class PhysicalLocation(_SarifModel):
    artifact_location: ArtifactLocation = Field(alias="artifactLocation")
    region: Region | None = None


class Location(_SarifModel):
    physical_location: PhysicalLocation = Field(alias="physicalLocation")


class Result(_SarifModel):
    """A single finding."""

    rule_id: str = Field(alias="ruleId")
    level: str | None = None
    message: Message
    locations: list[Location] = Field(default_factory=list)

    @property
    def uri(self) -> str | None:
        if not self.locations:
            return None
        return self.locations[0].physical_location.artifact_location.uri

    @property
    def line(self) -> int | None:
        if not self.locations or self.locations[0].physical_location.region is None:
            return None
        return self.locations[0].physical_location.region.start_line


class Run(_SarifModel):
    tool: Tool
    results: list[Result] = Field(default_factory=list)


class SarifLog(_SarifModel):
    """Top-level SARIF document."""

    version: str = VERSION
    schema_uri: str | None = Field(default=SCHEMA_URI, alias="$schema")
    runs: list[Run] = Field(default_factory=list)


def new_log(*runs: Run) -> SarifLog:
    """Create a log with the default version and schema."""
    return SarifLog(runs=list(runs))


def new_run(driver_name: str, results: list[Result], *, version: str | None = None) -> Run:
    return Run(tool=Tool(driver=Driver(name=driver_name, version=version)), results=results)


def new_result(rule_id: str, level: str, message: str, uri: str, line: int = 0) -> Result:
    """Build a result at *uri*; the region is omitted unless *line* is positive."""
    region = Region(start_line=line) if line > 0 else None
    location = Location(
        physical_location=PhysicalLocation(
            artifact_location=ArtifactLocation(uri=uri),
            region=region,
        )
    )
    return Result(rule_id=rule_id, level=level, message=Message(text=message), locations=[location])


def encode_log(log: SarifLog) -> str:
    """Serialize with 2-space indentation and a trailing newline."""
    return log.model_dump_json(by_alias=True, exclude_none=True, indent=2) + "\n"
