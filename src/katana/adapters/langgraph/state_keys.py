"""Default state key names for LangGraph integration."""

# Standard state keys read by Katana nodes
DOCUMENT_TEXT = "document_text"
DOCUMENT_HTML = "document_html"

# Keys written by Katana nodes
PARAGRAPHS = "paragraphs"
SENTENCES = "sentences"
PREPARED_TEXT = "prepared_text"
