"""
tiny test runner for the operator suites.

register cases with @test("description"), check with assert_that /
assert_raises / assert_sequence, and call run(title) under __main__.
failures raised by the library itself are reported with the argument name
or element index they carry, so a broken validation shows where it broke.
"""

import time
import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Type


class _c:
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """a check inside a case did not hold (as opposed to the case crashing)"""
    pass


class Outcome(Enum):
    PASSED = 'pass'
    FAILED = 'fail'
    ERRORED = 'error'


@dataclass
class _Case:
    description: str
    func: Callable[[], None]
    outcome: Optional[Outcome] = None
    detail: str = ''
    millis: float = 0.0


_cases: List[_Case] = []


# --- registration and checks ---

def test(description: str) -> Callable:
    """register a case; the function itself is returned untouched"""
    def decorator(func: Callable) -> Callable:
        _cases.append(_Case(description, func))
        return func
    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], action: Callable[[], Any],
                  message: str = "expected an error", **expected: Any) -> BaseException:
    """
    run action, require error_type, and return the raised error.
    keyword arguments name attributes the error must carry, e.g.
    assert_raises(MissingArgumentError, action, argument="source").
    """
    try:
        action()
    except error_type as e:
        for name, value in expected.items():
            actual = getattr(e, name, None)
            if actual != value:
                raise TestAssertionError(f"{message}: {name} was {actual!r}, expected {value!r}")
        return e
    raise TestAssertionError(f"{message} ({error_type.__name__} not raised)")


def assert_sequence(actual: Iterable[Any], expected: Iterable[Any], message: str = "sequences differ") -> None:
    """compare element by element and name the first position that differs"""
    left, right = list(actual), list(expected)
    for index, (a, b) in enumerate(zip(left, right)):
        if a != b:
            raise TestAssertionError(f"{message}: index {index} is {a!r}, expected {b!r}")
    if len(left) != len(right):
        raise TestAssertionError(f"{message}: length {len(left)}, expected {len(right)}")


def describe_error(error: BaseException) -> str:
    """error text plus the argument / index / value attributes the operators attach"""
    details = [f"{name}={getattr(error, name)!r}"
               for name in ('argument', 'index', 'value')
               if getattr(error, name, None) is not None]
    suffix = f" [{', '.join(details)}]" if details else ''
    return f"{type(error).__name__}: {error}{suffix}"


# --- running ---

def _execute(case: _Case, verbose: bool) -> None:
    started = time.perf_counter()
    try:
        case.func()
        case.outcome = Outcome.PASSED
    except TestAssertionError as e:
        case.outcome, case.detail = Outcome.FAILED, str(e)
    except Exception as e:
        case.outcome, case.detail = Outcome.ERRORED, describe_error(e)
        if verbose:
            traceback.print_exc()
    case.millis = (time.perf_counter() - started) * 1000


def run(title: str = "test run", only: Optional[str] = None, verbose: bool = False) -> bool:
    """
    execute the registered cases (those whose description contains `only`, if given),
    print one line per case and a summary, and return True when nothing failed.
    the registry is emptied afterwards so one script can run several suites.
    """
    selected = [case for case in _cases if only is None or only in case.description]
    print(f"\n{_c.info}=== {title} ({len(selected)} cases) ==={_c.reset}")

    for case in selected:
        _execute(case, verbose)
        if case.outcome is Outcome.PASSED:
            print(f"  {_c.ok}✔{_c.reset} {case.description} {_c.grey}{case.millis:.1f}ms{_c.reset}")
        else:
            print(f"  {_c.fail}✖ {case.outcome.value}{_c.reset} {case.description}")
            print(f"    {_c.grey}└─> {case.detail}{_c.reset}")

    _summarise(selected)
    _cases.clear()
    return all(case.outcome is Outcome.PASSED for case in selected)


def _summarise(cases: List[_Case]) -> None:
    counts = {outcome: sum(1 for case in cases if case.outcome is outcome) for outcome in Outcome}
    total_ms = sum(case.millis for case in cases)
    colour = _c.ok if counts[Outcome.PASSED] == len(cases) else _c.fail
    slowest = max(cases, key=lambda case: case.millis, default=None)

    print(f"\n{colour}--- {counts[Outcome.PASSED]} passed, {counts[Outcome.FAILED]} failed, "
          f"{counts[Outcome.ERRORED]} errored in {total_ms:.2f}ms ---{_c.reset}")
    if slowest is not None:
        print(f"  {_c.warn}slowest:{_c.reset} {slowest.description} ({slowest.millis:.1f}ms)\n")
