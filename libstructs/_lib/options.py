"""
Shared configuration and reporting.
"""
from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

import attr as attrs


@attrs.s(auto_attribs=True, frozen=True, kw_only=True)
class Options:
    outstream: TextIO = sys.stdout
    verbosity: int = 0


class Reporter:
    """
    Mixin giving a structure its ``options`` and the `msg` method.
    """

    options: Options

    def __init__(self, **kw: Any) -> None:
        self.options = Options(**kw)

    def msg(self, msg: str, ctx: Optional[object] = None, thresh: int = 0) -> None:
        """
        Log a message about this structure.

        :param ctx: The key, index or element the message is about.
        :param thresh: The minimal verbosity needed to show the message.
        """
        if self.options.verbosity < thresh:
            return
        context = type(self).__name__
        if ctx is not None:
            context = f"{context}[{ctx!r}]"
        print(f"{context}: {msg}", file=self.options.outstream)
