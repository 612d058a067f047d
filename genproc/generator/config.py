"""Generator configuration."""

from dataclasses import dataclass
from pathlib import Path

from dataclasses_json import DataClassJsonMixin

DEFAULT_NET_IMPORT = "github.com/xaevman/goat/core/net"
DEFAULT_BUFFER_IMPORT = "github.com/xaevman/goat/lib/buffer"


@dataclass(frozen=True)
class GeneratorConfig(DataClassJsonMixin):
    """Settings for one generator run, built once at start up.

    - root: directory searched recursively for source files
    - pattern: file name filter applied during the search
    - extension: extension of generated files
    - net_import / buffer_import: packages the generated handlers call into
    """

    root: Path = Path(".")
    pattern: str = "*.go"
    extension: str = "go"
    net_import: str = DEFAULT_NET_IMPORT
    buffer_import: str = DEFAULT_BUFFER_IMPORT
