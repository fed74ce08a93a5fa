"""Interpreter - script evaluation engine.

Reads source text into commands and executes them in order against one
environment and one command table. Delegates to:
- the parser (reader and tokenizer) for turning text into commands
- substitution.py for expanding words
- commands.py for dispatching to native commands and procs
"""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

from ..ast.types import Command, Script, Word, WordKind
from ..errors import RecursionLimitExceeded, ReturnSignal, TclError, UnknownCommand
from ..parser import read_script
from ..types import ExecutionLimits, OutputSink
from .builtins import create_command_table
from .commands import CommandTable
from .substitution import substitute
from .types import Environment, InterpreterContext, InterpreterState

logger = logging.getLogger(__name__)


class Interpreter:
    """Evaluator for just-tcl scripts.

    The environment and command table persist across calls to ``evaluate``,
    so one interpreter is one session.
    """

    def __init__(
        self,
        env: Optional[Environment] = None,
        commands: Optional[CommandTable] = None,
        limits: Optional[ExecutionLimits] = None,
        output: Optional[OutputSink] = None,
    ):
        """Initialize the interpreter.

        Args:
            env: Variable store (a fresh global scope if not provided).
            commands: Command table (the builtin commands if not provided).
            limits: Execution limits.
            output: Sink for ``puts`` output (stdout if not provided).
        """
        self._env = env if env is not None else Environment()
        self._commands = commands if commands is not None else create_command_table()
        self._limits = limits or ExecutionLimits()
        self._output = output or sys.stdout.write
        self._state = InterpreterState()

        self._ctx = InterpreterContext(
            env=self._env,
            commands=self._commands,
            limits=self._limits,
            state=self._state,
            output=self._output,
            evaluate=self.evaluate_nested,
            execute_script=self.execute_script,
            descend=self.descend,
        )

    @property
    def env(self) -> Environment:
        return self._env

    @property
    def commands(self) -> CommandTable:
        return self._commands

    @property
    def context(self) -> InterpreterContext:
        return self._ctx

    @contextmanager
    def descend(self) -> Iterator[None]:
        """Count one level of nesting for the duration of a ``with`` block.

        Raises:
            RecursionLimitExceeded: if the limit is already reached.
        """
        if self._state.depth >= self._limits.max_recursion_depth:
            raise RecursionLimitExceeded(self._limits.max_recursion_depth)
        self._state.depth += 1
        try:
            yield
        finally:
            self._state.depth -= 1

    def evaluate(self, source: str) -> str:
        """Evaluate a top-level script and return its value.

        A ``return`` outside any proc ends the script with the returned value.

        Raises:
            RecursionLimitExceeded: if nesting exceeds the configured limit or
                the Python stack, whichever comes first.
        """
        script = read_script(source)
        depth, scopes = self._state.depth, self._env.depth
        try:
            return self.execute_script(script)
        except ReturnSignal as signal:
            return signal.value
        except RecursionError:
            # the Python stack ran out before max_recursion_depth was reached
            self._state.depth = depth
            self._env.unwind(scopes)
            raise RecursionLimitExceeded(self._limits.max_recursion_depth) from None

    def evaluate_nested(self, source: str, line: int = 1, column: int = 1) -> str:
        """Evaluate a script nested in another evaluation (``[...]``)."""
        with self.descend():
            return self.execute_script(read_script(source, line, column))

    def execute_script(self, script: Script) -> str:
        """Execute each command in order; the value is the last command's."""
        result = ""
        for command in script:
            result = self.execute_command(command)
        return result

    def execute_command(self, command: Command) -> str:
        """Substitute the words of a command and dispatch it."""
        try:
            name = self._substitute_word(command.name)
            entry = self._commands.get(name)
            if entry is not None and entry.takes_block and command.block is not None:
                args = [self._substitute_word(word) for word in command.words[1:command.block_start]]
                args.append(command.block.text)
                self._state.block_position = (command.block.line, command.block.column + 1)
            else:
                args = [self._substitute_word(word) for word in command.args]
                self._state.block_position = None
            if entry is None:
                raise UnknownCommand(name)
            logger.debug("dispatch %s %s", name, args)
            return entry.invoke(self._ctx, args)
        except TclError as e:
            e.locate(command.line, command.column)
            raise

    def _substitute_word(self, word: Word) -> str:
        if word.is_literal:
            return word.text
        # content starts after the opening quote
        offset = 1 if word.kind is WordKind.QUOTED else 0
        return substitute(self._ctx, word.text, word.line, word.column + offset)
