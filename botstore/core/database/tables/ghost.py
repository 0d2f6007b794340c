"""Descriptors for the ghost file tables."""

from __future__ import annotations

from ..entities.ghost import GhostFile, GhostRevision
from ..interfaces import ModelTable


class GhostFilesTable(ModelTable):
    model = GhostFile


class GhostRevisionsTable(ModelTable):
    model = GhostRevision
