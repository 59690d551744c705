"""Host integration seams: document access, diagnostic display, settings."""

from bemhelper.host.memory import (
    MappingConfigSource,
    MemoryDiagnosticCollection,
    SourceDocument,
)
from bemhelper.host.services import (
    ConfigSource,
    DiagnosticCollection,
    TextDocument,
)

__all__ = [
    "ConfigSource",
    "DiagnosticCollection",
    "MappingConfigSource",
    "MemoryDiagnosticCollection",
    "SourceDocument",
    "TextDocument",
]
