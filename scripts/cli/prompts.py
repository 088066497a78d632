"""CLI prompts: input validation loops.

``EOFError`` / ``KeyboardInterrupt`` propagate so the main loop can exit
cleanly from any prompt.
"""


def ask(prompt: str) -> str:
    """Read one whitespace-trimmed line."""
    return input(prompt).strip()


def ask_non_negative_int(prompt: str) -> int:
    """Re-prompt until the user types an integer >= 0."""
    while True:
        raw = ask(prompt)
        try:
            value = int(raw)
        except ValueError:
            value = -1
        if value >= 0:
            return value
        print("Invalid input. Try again.")
