"""Go handler code generator for ``+NetMsg+`` records."""

import logging
from pathlib import Path

from jinja2 import Environment, PackageLoader, TemplateError

from .config import GeneratorConfig
from .types import ExportField, MessageSpec, is_variable_length

log = logging.getLogger(__name__)

env = Environment(
    loader=PackageLoader("genproc.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("handler.go.j2")


class EmitError(RuntimeError):
    """Raised when a handler file cannot be rendered or written."""


def _length_arg(export: ExportField) -> str:
    """Argument passed to buffer.Len<T>; only variable length types take one."""
    if is_variable_length(export):
        return f"nMsg.{export.name}"
    return ""


def output_path(spec: MessageSpec, config: GeneratorConfig) -> Path:
    """Return where the handler for a record is written."""
    return Path(spec.path) / f"msg{spec.type_name}.{config.extension}"


def render(spec: MessageSpec, config: GeneratorConfig) -> str:
    """Render a record to Go source code."""
    try:
        return template.render(
            spec=spec,
            extension=config.extension,
            net_import=config.net_import,
            buffer_import=config.buffer_import,
            length_arg=_length_arg,
        )
    except TemplateError as e:
        raise EmitError(f"cannot render handler for {spec.type_name}: {e}") from e


def emit(spec: MessageSpec, config: GeneratorConfig) -> Path:
    """Render a record and write it next to its source file."""
    path = output_path(spec, config)
    generated_file = render(spec, config)

    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(generated_file)
    except OSError as e:
        raise EmitError(f"cannot write {path}: {e}") from e

    log.info("\twrote: %s", path)
    return path
