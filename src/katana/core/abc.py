"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, List, Any


class Segmenter(Protocol):
    """Text segmenter. The default implementation is SentenceSegmenter."""

    def cut(self, text: str) -> List[List[str]]:
        """
        Split text into paragraphs of sentences.

        Args:
            text: Plain text, paragraphs separated by newlines

        Returns:
            List[List[str]]: Non-empty paragraphs of non-empty sentences
        """
        ...

    def segment(self, text: str) -> List[str]:
        """
        Split text into a flat list of sentences.

        Args:
            text: Input text to segment

        Returns:
            List[str]: Sentences in input order
        """
        ...


class TagHandler(Protocol):
    """Hooks called while walking a markup tree (see katana.markup.markdown)."""

    def enter(self, tag: Any, printer: Any) -> None:
        """Called before the children of tag are visited."""
        ...

    def exit(self, printer: Any) -> None:
        """Called after the children of the entered tag were visited."""
        ...


class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...


class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
