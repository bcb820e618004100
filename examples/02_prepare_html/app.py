"""
Example 2: HTML preparation with a YAML config

Renders an HTML article, cleans it and prints one sentence per line.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from katana.config.loader import load_config_from_string, ConfigLoadError
from katana.runtime.preparer import TextPreparer
from katana.markup.markdown import MarkupError

CONFIG = """
version: 1
markup:
  parser: html.parser
  fence_code: true
cleaning:
  strip_footnotes: true
output:
  sentence_separator: "\\n"
  paragraph_separator: "\\n\\n"
"""

ARTICLE = """
<html>
  <head><title>Ignored</title></head>
  <body>
    <!-- draft -->
    <h1>Green protests</h1>
    <p>For years, people in the U.A.E.R. have accepted murky air[1]. But
       dissent has been growing&nbsp;steadily!</p>
    <p>Run the report with:</p>
    <pre>make report</pre>
  </body>
</html>
"""


class ConsoleMeter:
    def inc(self, name: str, amount: int = 1, **tags: str): print(f"METRIC: {name} +{amount}")
    def observe(self, name: str, value: float, **tags: str): print(f"METRIC: {name} = {value}")


def main():
    print("\U0001f4f0 Katana HTML Preparation Example")
    print("=" * 40)

    try:
        config = load_config_from_string(CONFIG)
    except ConfigLoadError as e:
        print(f"❌ Config error: {e}")
        return

    preparer = TextPreparer(config=config, meter=ConsoleMeter())
    try:
        result = preparer.prepare(ARTICLE)
    except MarkupError as e:
        print(f"❌ {e}")
        return

    print(f"\n✅ {result.segmentation.paragraph_count} paragraphs, "
          f"{result.segmentation.sentence_count} sentences\n")
    print(result.text)


if __name__ == "__main__":
    main()
