"""genproc net message handler generator."""

from .config import GeneratorConfig as GeneratorConfig
from .metadata import build_specs as build_specs
from .metadata import validate as validate
from .parser import SourceError as SourceError
from .parser import parse_imports as parse_imports
from .parser import parse_source as parse_source
from .pipeline import run as run
from .scanner import scan_file as scan_file
from .types import *
