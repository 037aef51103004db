"""Visual and source views of one document, kept in sync."""

from canonhtml import DualViewEditor, Surface

saved: list[str] = []
editor = DualViewEditor("<p>Draft</p>", on_change=saved.append)

# Rich-text surface produces new HTML
editor.edit_visual("<div><p>Draft <b>two</b></p></div>")

# Switch to raw HTML: content is re-indented for editing
editor.switch_to(Surface.SOURCE)
print(editor.source)
print()

# Raw edits are taken verbatim and reported immediately
editor.edit_source(editor.source.replace("two", "three"))
editor.switch_to(Surface.VISUAL)

print("Content handed to the store:", saved[-1] == editor.content)
print("Changes reported:", len(saved))
