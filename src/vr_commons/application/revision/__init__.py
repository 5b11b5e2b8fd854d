"""Application – revision resolution."""
from vr_commons.application.revision.resolver import RevisionResolver

__all__ = ["RevisionResolver"]
