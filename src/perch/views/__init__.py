"""Views — the mountable units the router creates, updates, and disposes.

The reconciler depends only on the ``Mountable`` protocol. ``View`` and
``TemplateView`` are ready-made implementations; ``Document`` is the
in-memory mount resolver.
"""

from perch.views.mount import Document, MountPoint, MountResolver
from perch.views.reconciler import MountedView, ViewReconciler
from perch.views.view import Mountable, View, ViewFactory

__all__ = [
    "Document",
    "MountPoint",
    "MountResolver",
    "Mountable",
    "MountedView",
    "TemplateView",
    "View",
    "ViewFactory",
    "ViewReconciler",
]


def __getattr__(name: str) -> object:
    """``TemplateView`` is imported lazily; it pulls in kida."""
    if name == "TemplateView":
        from perch.views.template import TemplateView

        return TemplateView

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
