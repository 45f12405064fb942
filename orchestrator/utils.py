"""Utility functions for the orchestrator."""
import typing as t

from rich.console import Console

console = Console()
error_console = Console(stderr=True)


def collect_sentences(sentences: tuple[str, ...], sentences_file: t.Optional[t.TextIO]) -> list[str]:
    """Gather sentences from the command line and an optional file.

    Args:
        sentences: Sentences given as arguments
        sentences_file: Open file with one sentence per line; blank lines and
            lines starting with '#' are skipped

    Returns:
        List of sentences, arguments first

    Raises:
        SystemExit: If no sentence was given at all
    """
    collected = [sentence for sentence in sentences if sentence.strip()]

    if sentences_file is not None:
        for line in sentences_file:
            line = line.strip()
            if line and not line.startswith("#"):
                collected.append(line)

    if not collected:
        error_console.print(
            "[red]Error:[/red] Provide one or more schedule sentences, e.g. \"내일 오후 3시에 회의\"."
        )
        raise SystemExit(1)

    return collected
