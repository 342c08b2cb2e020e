import logging
import sys
from typing import Optional, TextIO

from .default_flags import AFFIRMATIVE_RESPONSES
from .utils import contains

logger = logging.getLogger(__name__)

def is_affirmative(answer: str) -> bool:
    words = answer.split()
    if not words:
        return False
    return contains(words[0].lower(), AFFIRMATIVE_RESPONSES)

class Prompter:
    """Asks yes/no questions on a pair of text streams."""
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin
        self.stdout = stdout

    def ask(self, prompt: str) -> bool:
        stdin = self.stdin or sys.stdin
        stdout = self.stdout or sys.stdout
        print(prompt, file=stdout, flush=True)
        try:
            answer = stdin.readline()
        except (OSError, ValueError) as e:
            # An unreadable answer is a "no"
            logger.debug("prompt read failed: %r", e)
            return False
        return is_affirmative(answer)
