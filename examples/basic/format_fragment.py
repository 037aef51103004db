"""Re-indent minified editor HTML in one call — zero config, zero deps."""

from canonhtml import format_html

html = '<h2>Intro</h2><p>Read <a href="/docs">the docs</a>.</p><ul><li>one</li><li>two</li></ul>'
print(format_html(html))
