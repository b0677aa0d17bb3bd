"""Parse and render a man page in 3 lines, with the bundled theme."""

from mansite import parse, render

page = parse(".TH hello 1 2024-01-01 mansite Hello\n.SH NAME\nhello - say hello")
html = render(page)
print(html)
