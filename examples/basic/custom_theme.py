"""Render with a custom stylesheet and hues, then dump the parsed structure."""

from pathlib import Path

from mansite import Converter, RenderConfig

here = Path(__file__).parent
source = (here.parent / "pages" / "mansite.1").read_text(encoding="utf-8")

convert = Converter(RenderConfig(background_hue=160, text_hue=160, accent_hue=330))
page = convert.parse(source, source_file="mansite.1")

print(convert.summarize(page))
print(convert.render(page))
