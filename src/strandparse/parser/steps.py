"""Step programs: sequential composition with named intermediate results.

A program is an ordered list of steps evaluated by an explicit loop. Each
step either names a fixed parser (step()) or builds its parser from the
results bound so far (bind()). Named steps record their Result in an
immutable Bindings mapping, which later steps and the final ``returning``
function read from.

Example:
    >>> version = program(
    ...     step(many1(digit), "major"),
    ...     step(char(".")),
    ...     step(many1(digit), "minor"),
    ...     returning=lambda b: f"{b['major']}.{b['minor']}",
    ... )
    >>> execute(version, "1.0")
    '1.0'
"""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from strandparse.diagnostics import ContractViolationError, ErrorTemplate
from strandparse.outcome import Failure, Outcome, Result, make_result
from strandparse.parser.protocol import Parser, parse
from strandparse.stream import Stream

__all__ = ["Bindings", "Step", "bind", "program", "step"]


class Bindings(Mapping[str, Any]):
    """Read-only mapping of step names to the values they produced.

    Indexing returns the value; result() returns the full Result, for
    access to the span or matched text of a step.
    """

    __slots__ = ("_results",)

    def __init__(self, results: Mapping[str, Result[Any]] | None = None) -> None:
        self._results: dict[str, Result[Any]] = dict(results or {})

    def __getitem__(self, name: str) -> Any:
        return self._results[name].value

    def __iter__(self) -> Iterator[str]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __repr__(self) -> str:
        return f"Bindings({dict(self)!r})"

    def result(self, name: str) -> Result[Any]:
        """Return the Result recorded for name.

        Raises:
            KeyError: If no step with that name has run
        """
        return self._results[name]

    def bind(self, name: str, result: Result[Any]) -> "Bindings":
        """Return new Bindings with name bound to result (rebinding replaces)."""
        return Bindings({**self._results, name: result})


@dataclass(frozen=True, slots=True)
class Step:
    """One step of a program.

    Exactly one of ``parser`` and ``build`` is set. Prefer the step() and
    bind() constructors.

    Attributes:
        name: Binding name for the step's result, or None to discard it
        parser: Fixed parser to run
        build: Function from the bindings so far to the parser to run
    """

    name: str | None
    parser: Parser[Any] | None = None
    build: Callable[[Bindings], Parser[Any]] | None = None

    def __post_init__(self) -> None:
        """Reject steps with both or neither of parser and build.

        Raises:
            ContractViolationError: If the step is ill-formed
        """
        if (self.parser is None) == (self.build is None):
            raise ContractViolationError(ErrorTemplate.invalid_step(self.name))

    def resolve(self, bindings: Bindings) -> Parser[Any]:
        """Return the parser this step runs given the current bindings."""
        if self.build is not None:
            return self.build(bindings)
        return self.parser  # type: ignore[return-value]


def step(parser: Parser[Any], name: str | None = None) -> Step:
    """Step running a fixed parser, optionally binding its result to name."""
    return Step(name, parser=parser)


def bind(build: Callable[[Bindings], Parser[Any]], name: str | None = None) -> Step:
    """Step whose parser is computed from earlier results.

    Returning fail from build terminates the program with a failure at the
    current position.
    """
    return Step(name, build=build)


def program(
    *steps: Step,
    returning: Callable[[Bindings], Any] | None = None,
) -> Parser[Any]:
    """Run steps in order, threading bindings and stopping at the first failure.

    Args:
        *steps: Steps built with step() or bind()
        returning: Computes the overall value from the bindings; when
            omitted, the value of the last step is used (None if there are
            no steps)

    Returns:
        Parser whose Result spans every step and whose matched text is the
        concatenation of theirs
    """
    sequence_of_steps = tuple(steps)

    def run(stream: Stream) -> Outcome[Any]:
        bindings = Bindings()
        current = stream
        value: Any = None
        matched: list[str] = []
        for entry in sequence_of_steps:
            outcome = parse(entry.resolve(bindings), current)
            if isinstance(outcome, Failure):
                return outcome
            if entry.name is not None:
                bindings = bindings.bind(entry.name, outcome)
            value = outcome.value
            matched.append(outcome.matched)
            current = outcome.next
        if returning is not None:
            value = returning(bindings)
        return make_result(value, current, stream, "".join(matched))

    return run
