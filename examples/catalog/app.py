"""Catalog — a small shop navigated entirely client-side.

Demonstrates string rules with parameters, a pre-built pattern, a
handler route, listeners, and view reuse across navigations.

Run:
    python app.py
"""

import logging
import re
from pathlib import Path

from kida import Environment, FileSystemLoader

from perch import Document, Router, TemplateView

TEMPLATES = Path(__file__).parent / "templates"
env = Environment(loader=FileSystemLoader(str(TEMPLATES)), autoescape=True)


class ListView(TemplateView):
    environment = env
    template_name = "list.html"

    def context(self) -> dict[str, object]:
        query = self.data["route"].query
        return {"category": query["category"], "page": query.get("page", "1")}


class DetailView(TemplateView):
    environment = env
    template_name = "detail.html"

    def context(self) -> dict[str, object]:
        return {"item_id": self.data["route"].query["1"]}


document = Document("#main")
router = Router(mount_resolver=document)
titles: list[str] = []

router.add("/list/:category", view_factory=ListView, title="Catalog")
router.add(re.compile(r"^/item/(\d+)$"), view_factory=DetailView, title="Item")


@router.route("/about", title="About")
def about(location):
    document["#main"].content = "<p>About us</p>"


router.listen(lambda location, config: titles.append(config.meta["title"]))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    router.start()
    for url in ("/list/shoes", "/list/bags?page=2", "/item/9", "/about", "/nowhere"):
        router.navigate(url)
        print(f"{url:<20} {document['#main'].content.strip()!r}")
