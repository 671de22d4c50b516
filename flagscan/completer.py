# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `FlagCompleter`, a Prompt Toolkit completer that suggests the flag
names and aliases declared in a `FlagSet`.

Completions come from `FlagSet.completion_words()`, so they always reflect
the declarations and never require a parse. Once a `--` terminator has been
typed nothing more is suggested, matching how the scanner treats the rest of
the line as positionals.
"""
from __future__ import annotations

import os
import shlex
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from flagscan.flag_kind import FlagKind
from flagscan.flag_set import FlagSet
from flagscan.parser_types import TERMINATOR


class FlagCompleter(Completer):
    """
    Prompt Toolkit completer for flag names.

    Args:
        flag_set (FlagSet): The flags to complete.
    """

    def __init__(self, flag_set: FlagSet):
        self.flag_set = flag_set

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        try:
            tokens = shlex.split(text)
        except ValueError:
            return
        cursor_at_end_of_token = text.endswith((" ", "\t")) or not text

        if TERMINATOR in (tokens if cursor_at_end_of_token else tokens[:-1]):
            return

        stub = "" if cursor_at_end_of_token else tokens[-1]
        previous = tokens if cursor_at_end_of_token else tokens[:-1]
        if previous and self._expects_value(previous[-1]):
            return
        if stub and not stub.startswith("-"):
            return
        yield from self._yield_lcp_completions(self.flag_set.completion_words(), stub)

    def _expects_value(self, token: str) -> bool:
        descriptor = self.flag_set.get(token)
        return descriptor is not None and descriptor.kind is not FlagKind.BOOLEAN

    def _yield_lcp_completions(
        self, suggestions: list[str], stub: str
    ) -> Iterable[Completion]:
        """
        Yield completions for the stub using longest-common-prefix logic.

        - A single match is yielded in full.
        - Several matches sharing a prefix longer than the stub yield that prefix
          first, then every match.
        """
        matches = [s for s in suggestions if s.startswith(stub)]
        if not matches:
            return

        lcp = os.path.commonprefix(matches)
        if len(matches) > 1 and len(lcp) > len(stub):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
        for match in matches:
            yield Completion(match, start_position=-len(stub), display=match)
