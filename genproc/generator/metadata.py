"""Export field extraction and validation of generation records."""

import logging
from dataclasses import replace

from .types import Candidate, ExportField, GoField, GoTypeSpec, MessageSpec

log = logging.getLogger(__name__)

EXPORT_FLAG = "+export+"


def set_caps(text: str) -> str:
    """Capitalize the first letter, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def export_field(field: GoField) -> ExportField | None:
    """Return the export for a field, or None if it is not exported.

    Fields without the export flag, with zero or several names, or with a
    type that is not a bare identifier are left out.
    """
    if not any(EXPORT_FLAG in comment for comment in field.comments):
        return None
    if len(field.names) != 1:
        return None
    if field.type_name is None:
        return None

    return ExportField(name=field.names[0], type=set_caps(field.type_name))


def build_spec(spec: MessageSpec, type_spec: GoTypeSpec) -> MessageSpec:
    """Fill in the type name and exports of a record from one type spec."""
    result = replace(spec, type_name="", exports=[])

    if type_spec.fields is None:
        log.info("\t%s is not a struct", type_spec.name)
        return result

    result.type_name = type_spec.name
    log.info("\tstruct name: %s", result.type_name)

    for field in type_spec.fields:
        export = export_field(field)
        if export is None:
            continue

        result.exports.append(export)
        log.info("\t\texport %s :: %s", export.name, export.type)

    return result


def build_specs(candidate: Candidate) -> list[MessageSpec]:
    """Build one record per type spec of the candidate's declaration."""
    return [build_spec(candidate.spec, type_spec) for type_spec in candidate.decl.specs]


def missing(spec: MessageSpec) -> list[str]:
    """Return the names of the parts a record is missing."""
    result: list[str] = []
    if not spec.type_name:
        result.append("type name")
    if not spec.signature:
        result.append("signature")
    if not spec.package:
        result.append("package")
    if not spec.exports:
        result.append("exported fields")
    return result


def validate(spec: MessageSpec) -> bool:
    """Check that a record has enough data to generate code from."""
    return not missing(spec)
