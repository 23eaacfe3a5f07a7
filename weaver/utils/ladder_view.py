from typing import List, Optional

from weaver.verifiers.models import ValidationResult


def format_result(result: Optional[ValidationResult]) -> str:
    """Render letter states as "[G Y L L]"; empty string when there is no result."""
    if result is None or not result.states:
        return ""
    return "[" + " ".join(state.code for state in result.states) + "]"


def render_path(path: List[str], results: Optional[List[ValidationResult]] = None) -> str:
    """Render a ladder one word per line, each guess followed by its feedback."""
    if not path:
        return "  (Path is empty)"

    results = results or []
    lines = [f"  {path[0]}"]
    for i, word in enumerate(path[1:]):
        result = results[i] if i < len(results) else None
        lines.append(f"  {word} {format_result(result)}".rstrip())

    return '\n'.join(lines)


def render_board(
    start_word: Optional[str],
    target_word: Optional[str],
    path: List[str],
    results: List[ValidationResult],
    title: str = "Current Game State",
) -> str:
    """Render the start/target header followed by the guessed path."""
    lines = [
        f"--- {title} ---",
        f"Start Word: {start_word}",
        f"Target Word: {target_word}",
        "Path:",
        render_path(path, results),
        "-" * 26,
    ]
    return '\n'.join(lines)


if __name__ == '__main__':
    from weaver.verifiers import load_dictionary, find_shortest_path, score_path

    dictionary = load_dictionary()
    ladder = find_shortest_path("PORE", "RUDE", dictionary)

    print("Solution for PORE -> RUDE:")
    print(render_path(ladder, score_path("RUDE", ladder, dictionary)))
