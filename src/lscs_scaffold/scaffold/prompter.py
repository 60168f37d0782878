"""Interactive prompts backed by click."""

import click


class ClickPrompter:
    """Asks questions on the controlling terminal."""

    def ask(self, question: str) -> str:
        """Return the stripped answer; an empty answer is returned as ''."""
        answer = click.prompt(
            click.style(question, fg="yellow"), default="", show_default=False,
        )
        return answer.strip()

    def confirm(self, question: str, default: bool = False) -> bool:
        return click.confirm(click.style(question, fg="yellow"), default=default)
