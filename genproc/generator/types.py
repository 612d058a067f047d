"""Type definitions for source scanning and code generation."""

from dataclasses import dataclass, field
from pathlib import Path

from dataclasses_json import DataClassJsonMixin


@dataclass
class GoField(DataClassJsonMixin):
    """Represents one field declaration of a struct.

    - names: declared names, empty for embedded fields
    - type_name: set only when the declared type is a bare identifier
    - comments: text of the trailing comments on the field's last line
    """

    names: list[str]
    type_name: str | None
    comments: list[str]


@dataclass
class GoTypeSpec(DataClassJsonMixin):
    """Represents a single type specification.

    fields=None means the underlying type is not a struct.
    """

    name: str
    fields: list[GoField] | None


@dataclass
class GoTypeDecl(DataClassJsonMixin):
    """Represents a top level ``type`` declaration and its doc comments."""

    specs: list[GoTypeSpec]
    doc: list[str]


@dataclass
class GoSourceFile(DataClassJsonMixin):
    """Represents a fully parsed source file."""

    package: str
    imports: list[str]
    types: list[GoTypeDecl]


@dataclass
class ExportField(DataClassJsonMixin):
    """Represents a field exported to the wire.

    type is the normalized tag used to pick buffer functions (``int`` -> ``Int``).
    """

    name: str
    type: str


@dataclass
class MessageSpec(DataClassJsonMixin):
    """Generation record for one annotated type."""

    signature: str
    package: str
    path: str
    imports: list[str]
    type_name: str = ""
    exports: list[ExportField] = field(default_factory=list)
    source: str = ""


@dataclass
class Candidate:
    """An annotated declaration paired with the record it opened."""

    spec: MessageSpec
    decl: GoTypeDecl


@dataclass
class GenerationReport:
    """Outcome of a generator run."""

    files: int = 0
    written: list[Path] = field(default_factory=list)
    skipped: list[MessageSpec] = field(default_factory=list)
    conflicts: list[Path] = field(default_factory=list)


# Tags whose encoded length depends on the value.
VARIABLE_LENGTH_TYPES = frozenset(["String"])


def is_variable_length(export: ExportField) -> bool:
    """Check if an export needs a length probe of its value."""
    return export.type in VARIABLE_LENGTH_TYPES
