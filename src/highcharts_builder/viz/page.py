"""Minimal standalone HTML page around a rendered chart."""

from __future__ import annotations

import html

PAGE_TEMPLATE = """<html>
    <head>
        <title>{title}</title>
        <meta http-equiv="Content-Type" content="text/html; charset=utf-8" />
        {scripts}
    </head>
    <body>
        <div id="{container_id}"></div>
        {theme}
        <script type="text/javascript">
            window.chart = {chart}
        </script>
    </body>
</html>
"""


def build_page(
    *,
    title: str,
    container_id: str,
    scripts: str,
    chart_js: str,
    theme: str | None = None,
) -> str:
    return PAGE_TEMPLATE.format(
        title=html.escape(title),
        container_id=html.escape(container_id, quote=True),
        scripts=scripts,
        theme=theme or "",
        chart=chart_js,
    )
