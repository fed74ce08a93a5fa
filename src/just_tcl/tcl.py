"""Main Tcl class - the primary API for just-tcl.

Example usage:
    from just_tcl import Tcl

    tcl = Tcl()
    result = tcl.run('set example world; puts "Hello, $example"')
    print(result.stdout)  # "Hello, world\\n"

    # Values are returned directly by eval(), errors are raised
    tcl.eval("+ 1 2")  # "3"

    # Host commands receive the interpreter context and string arguments
    packages = []
    tcl.register_command("makedepends", lambda ctx, args: packages.extend(args))
    tcl.run("makedepends { zlib-devel readline-devel }")

    # With execution limits
    tcl = Tcl(limits=ExecutionLimits(max_recursion_depth=50))

The module also exposes the embedding functions ``evaluate``,
``register_command``, ``get_variable`` and ``set_variable`` for hosts that
manage their own Environment and CommandTable.
"""

from typing import Mapping, Optional

from .errors import TclError
from .interpreter import CommandTable, Environment, Interpreter, create_command_table
from .interpreter.commands import NativeCallback, NativeCommand
from .types import ExecResult, ExecutionLimits, OutputSink


class Tcl:
    """A persistent interpreter session.

    Variables, procs and registered commands survive across ``eval`` and
    ``run`` calls until ``reset`` is called. Output written by ``puts`` is
    captured and available from ``stdout``.
    """

    def __init__(
        self,
        *,
        variables: Optional[Mapping[str, str]] = None,
        commands: Optional[CommandTable] = None,
        limits: Optional[ExecutionLimits] = None,
    ):
        """Initialize the session.

        Args:
            variables: Initial global variables.
            commands: Command table to start from. If not provided, uses the
                builtin commands. The table is copied, so registering commands
                on this session does not affect it.
            limits: Execution limits.
        """
        self._initial_variables = dict(variables or {})
        self._initial_commands = commands if commands is not None else create_command_table()
        self._limits = limits or ExecutionLimits()
        self._output: list[str] = []
        self._interpreter = self._create_interpreter()

    def _create_interpreter(self) -> Interpreter:
        return Interpreter(
            env=Environment(self._initial_variables),
            commands=self._initial_commands.copy(),
            limits=self._limits,
            output=self._output.append,
        )

    @property
    def env(self) -> Environment:
        """Get the environment."""
        return self._interpreter.env

    @property
    def commands(self) -> CommandTable:
        """Get the command table."""
        return self._interpreter.commands

    @property
    def stdout(self) -> str:
        """Everything written by ``puts`` since the session started or was reset."""
        return "".join(self._output)

    def eval(self, script: str) -> str:
        """Evaluate a script and return its value.

        Raises:
            TclError: the first error raised by the script.
        """
        return self._interpreter.evaluate(script)

    def run(self, script: str) -> ExecResult:
        """Evaluate a script, reporting errors in the result instead of raising.

        Returns:
            ExecResult with the output written during this run, the error
            message (if any), an exit code of 0 or 1, and the script's value.
        """
        mark = len(self._output)
        try:
            value = self._interpreter.evaluate(script)
        except TclError as e:
            return ExecResult(
                stdout="".join(self._output[mark:]),
                stderr=f"{e}\n",
                exit_code=1,
            )
        return ExecResult(
            stdout="".join(self._output[mark:]),
            stderr="",
            exit_code=0,
            result=value,
        )

    def register_command(
        self,
        name: str,
        callback: NativeCallback,
        min_args: int = 0,
        max_args: Optional[int] = None,
        takes_block: bool = False,
    ) -> NativeCommand:
        """Install a native command in this session."""
        return register_command(self.commands, name, callback, min_args, max_args, takes_block)

    def get_variable(self, name: str) -> str:
        """Read a global-or-visible variable, raising UndefinedVariable if unset."""
        return get_variable(self.env, name)

    def set_variable(self, name: str, value: str) -> str:
        """Set a variable in the innermost scope."""
        return set_variable(self.env, name, value)

    def reset(self) -> None:
        """Reset variables, commands and captured output to their initial state."""
        self._output.clear()
        self._interpreter = self._create_interpreter()


def evaluate(
    source: str,
    env: Environment,
    table: CommandTable,
    *,
    output: Optional[OutputSink] = None,
    limits: Optional[ExecutionLimits] = None,
) -> str:
    """Evaluate ``source`` against a host-owned environment and command table.

    ``puts`` writes to ``output`` (stdout if not provided).

    Raises:
        TclError: the first error raised by the script.
    """
    return Interpreter(env=env, commands=table, limits=limits, output=output).evaluate(source)


def register_command(
    table: CommandTable,
    name: str,
    callback: NativeCallback,
    min_args: int = 0,
    max_args: Optional[int] = None,
    takes_block: bool = False,
) -> NativeCommand:
    """Install a native command ``callback(ctx, args) -> value`` in ``table``.

    With ``takes_block``, a trailing brace block is passed to the callback as
    one literal argument instead of being flattened into words.
    """
    return table.register(name, callback, min_args, max_args, takes_block)


def get_variable(env: Environment, name: str) -> str:
    """Look up a variable, innermost scope first."""
    return env.get(name)


def set_variable(env: Environment, name: str, value: str) -> str:
    """Bind a variable in the innermost scope."""
    return env.set(name, value)
