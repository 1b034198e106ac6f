from releasemeta.engine.labels import generate_label
from releasemeta.engine.models import (
    NOT_FOUND,
    Found,
    LinkDetails,
    NormalizedName,
    NotFound,
    ParsedMetadata,
)
from releasemeta.engine.parser import ReleaseParser, default_parser, inspect, parse
from releasemeta.engine.tables import DEFAULT_TABLES, ReleaseTables, build_release_tables

__all__ = [
    'generate_label',
    'NOT_FOUND',
    'Found',
    'LinkDetails',
    'NormalizedName',
    'NotFound',
    'ParsedMetadata',
    'ReleaseParser',
    'default_parser',
    'inspect',
    'parse',
    'DEFAULT_TABLES',
    'ReleaseTables',
    'build_release_tables',
]
