from dataclasses import dataclass
from typing import FrozenSet, List, Sequence, Tuple

from .default_flags import END_OF_OPTIONS, FLAG_TOKENS
from .errors import UsageError
from .models import Flags

@dataclass(frozen=True)
class ParsedArgs:
    flags: Flags
    operands: Tuple[str, ...]

def classify(tokens: Sequence[str]) -> Tuple[FrozenSet[str], List[str]]:
    """Split raw tokens into the set of recognized flag tokens and the ordered operands.

    Anything that is not a recognized flag is an operand, including unknown
    dash-prefixed tokens. After "--" every token is an operand.
    """
    if not tokens:
        raise UsageError("no arguments given")

    flag_tokens = set()
    operands: List[str] = []
    seen_end_of_options = False
    for token in tokens:
        if token == END_OF_OPTIONS and not seen_end_of_options:
            seen_end_of_options = True
            continue
        if not seen_end_of_options and token in FLAG_TOKENS:
            flag_tokens.add(token)
            continue
        operands.append(token)
    return frozenset(flag_tokens), operands

def parse_args(tokens: Sequence[str]) -> ParsedArgs:
    flag_tokens, operands = classify(tokens)
    return ParsedArgs(Flags.from_tokens(flag_tokens), tuple(operands))
