"""Convert Markdown in 3 lines — zero config, zero deps."""

from undermark import render

html = render("# Hello __World__\n_emphasis_ and [a link](https://example.com \"Example\")")
print(html)
