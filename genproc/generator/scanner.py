"""Discovery of ``+NetMsg+`` annotated type declarations."""

import logging
import os
import re
from pathlib import Path

from .parser import parse_source
from .types import Candidate, GoSourceFile, MessageSpec

log = logging.getLogger(__name__)

NETMSG_PATTERN = re.compile(r"/\* \+NetMsg\+ (.*) \*/")


def match_annotation(text: str) -> str | None:
    """Return the signature carried by a ``/* +NetMsg+ <sig> */`` comment.

    None means the comment is not an annotation.
    """
    match = NETMSG_PATTERN.search(text)
    if match is None:
        return None
    return match.group(1).strip()


def scan_source(source: GoSourceFile, path: str | Path, imports: list[str]) -> list[Candidate]:
    """Open a record for every annotation attached to a type declaration.

    Candidates come back in source order: declaration order first, then
    comment order within a declaration's doc.
    """
    directory = os.path.dirname(path) or "."
    candidates: list[Candidate] = []

    for decl in source.types:
        for comment in decl.doc:
            signature = match_annotation(comment)
            if signature is None:
                continue

            spec = MessageSpec(
                signature=signature,
                package=source.package,
                path=directory,
                imports=imports,
                source=str(path),
            )
            candidates.append(Candidate(spec=spec, decl=decl))

            log.info("%s: package %s, sig %s added", path, source.package, signature)

    return candidates


def scan_file(path: str | Path, imports: list[str]) -> list[Candidate]:
    """Parse a source file in full and collect its annotated declarations."""
    return scan_source(parse_source(path), path, imports)
