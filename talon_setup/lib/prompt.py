from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)

_AFFIRMATIVE = re.compile(r"^(y|yes)$", re.IGNORECASE)

InputFn = Callable[[str], str]


class Selector:
    """Interactive yes/no and numbered-choice prompts.

    max_attempts bounds the re-prompt loop of choose(); None re-prompts forever.
    """

    def __init__(self, input_fn: InputFn = input, *, max_attempts: Optional[int] = None):
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be >= 1 or None")
        self._input = input_fn
        self.max_attempts = max_attempts

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self._input(prompt)
        except EOFError:
            logger.warning("No input available for prompt %r", prompt.strip())
            return None

    def ask(self, question: str) -> bool:
        answer = self._read(f"{question} (y/n): ")
        yes = answer is not None and bool(_AFFIRMATIVE.match(answer.strip()))
        logger.info("%s -> %s", question, "yes" if yes else "no")
        return yes

    def choose(self, title: str, options: Sequence[str]) -> Optional[str]:
        """Return the chosen option, or None when input ran out or max_attempts was hit."""
        if not options:
            raise ValueError("choose() needs at least one option")

        logger.info("%s", title)
        attempts = 0
        while self.max_attempts is None or attempts < self.max_attempts:
            attempts += 1
            for i, opt in enumerate(options, start=1):
                logger.info("  %d) %s", i, opt)
            answer = self._read("#? ")
            if answer is None:
                return None
            raw = answer.strip()
            if raw.isdecimal() and 1 <= int(raw) <= len(options):
                choice = options[int(raw) - 1]
                logger.info("Selected %s", choice)
                return choice
            logger.warning("Invalid option. Choose 1 or %d.", len(options))

        logger.warning("No valid selection after %d attempts; skipping", attempts)
        return None
