"""
Example 1: Sentence segmentation with an injected logger

Shows how to split prose into paragraphs of sentences and wire the
segmenter into a LangGraph node.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from katana.segmenters.sentence import SentenceSegmenter
from katana.core.util import SimpleConsoleLogger

TEXT = (
    "Dr. C. Jeung measured 1.5 liters in the U.S. lab. Nobody expected it!\n"
    "Some ask: “Is this real?” Others wait... (They always do.) "
    "She said 'stop.' Then she left."
)


def main():
    print("✂️  Katana Segmentation Example")
    print("=" * 40)

    segmenter = SentenceSegmenter(logger=SimpleConsoleLogger())

    print("\n\U0001f4dd Paragraphs:")
    for number, paragraph in enumerate(segmenter.cut(TEXT), start=1):
        print(f"\n¶ {number}")
        for sentence in paragraph:
            print(f"   • {sentence}")

    # LangGraph node usage example
    try:
        from katana.adapters.langgraph.nodes import make_segment_node
        from katana.adapters.langgraph.state_keys import DOCUMENT_TEXT, SENTENCES
    except ImportError:
        print("\n⚠️  langchain-core not installed, skipping node example")
        return

    node = make_segment_node(segmenter, text_key=DOCUMENT_TEXT)
    update = node.invoke({DOCUMENT_TEXT: TEXT})
    print(f"\n\U0001f3af Node result: {len(update[SENTENCES])} sentences")


if __name__ == "__main__":
    main()
