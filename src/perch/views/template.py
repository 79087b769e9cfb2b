"""Kida-rendered views.

A ``TemplateView`` renders a kida template with the view's data as
context. The current location is available as ``route``::

    env = Environment(loader=FileSystemLoader("templates"))

    class ListView(TemplateView):
        environment = env
        template_name = "list.html"

    router.add("/list/:category", view_factory=ListView)

Inline sources work too (``source = "<h1>{{ route.path }}</h1>"``).
"""

from functools import cache
from typing import Any, ClassVar

from kida import Environment

from perch.views.view import View


@cache
def default_environment() -> Environment:
    """Shared environment for views that don't bring their own."""
    return Environment(autoescape=True)


class TemplateView(View):
    """A view whose content is a rendered kida template.

    Set ``template_name`` (loaded through ``environment``) or ``source``
    (an inline template string) on the subclass, or pass them to the
    constructor.
    """

    environment: ClassVar[Environment | None] = None
    template_name: ClassVar[str | None] = None
    source: ClassVar[str | None] = None

    def __init__(
        self,
        environment: Environment | None = None,
        template_name: str | None = None,
        *,
        source: str | None = None,
    ) -> None:
        super().__init__()
        self._env = environment or type(self).environment or default_environment()
        self._template_name = template_name or type(self).template_name
        self._source = source or type(self).source
        if self._template_name is None and self._source is None:
            msg = f"{type(self).__name__} needs a template_name or a source."
            raise TypeError(msg)
        self._template: Any = None

    def _load(self) -> Any:
        if self._template is None:
            if self._template_name is not None:
                self._template = self._env.get_template(self._template_name)
            else:
                self._template = self._env.from_string(self._source)
        return self._template

    def context(self) -> dict[str, Any]:
        """Template context. Override to add derived values."""
        return dict(self.data)

    def render(self) -> str:
        return self._load().render(self.context())
