"""
vr_commons – Versioned entity toolkit.

Import path convention::

    from vr_commons.kernel.ddd import VersionedEntity, to_output_view
    from vr_commons.kernel.revision import DeserializationMode, revision_type
    from vr_commons.kernel.errors import RevisionDeserializationError
    from vr_commons.application.revision import RevisionResolver
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
