"""Server-rendered HTML pages."""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from example_site.services.example import ExampleService


def render_home_page(service: ExampleService) -> str:
    """Render the home page showing a freshly generated id."""
    example = service.get_example()
    return _HOME_PAGE_HTML.format(example_id=escape(example[0].id))


_HOME_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Example Site</title>
    <style>
      main {{
        display: flex;
        min-height: 100vh;
        align-items: center;
        justify-content: center;
      }}
      .id {{ font-family: ui-sans-serif, system-ui, sans-serif; font-size: 1.125rem; }}
    </style>
  </head>
  <body>
    <main>
      <div class="id">ID: {example_id}</div>
    </main>
  </body>
</html>
"""
