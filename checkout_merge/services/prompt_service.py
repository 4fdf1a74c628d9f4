"""Interactive yes/no prompts"""
from typing import Optional, TextIO

from rich.console import Console

console = Console(soft_wrap=True)


def read_yes_no(prompt: str, stream: Optional[TextIO] = None) -> bool:
    """Print a prompt and read one answer line.

    Returns True only when the trimmed answer is "y" (any case). End of
    input counts as "no".
    """
    console.print(prompt, markup=False, highlight=False)
    try:
        answer = console.input(stream=stream)
    except EOFError:
        return False
    return answer.strip().lower() == "y"
