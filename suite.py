import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_registry: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    """ansi color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


# --- custom exception for assertions ---

class SuiteAssertionError(AssertionError):
    """raised by assert_that/assert_raises so failures read differently from crashes."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """register a function as a test case. the function stays callable, so pytest can collect it too."""

    def decorator(func: Callable) -> Callable:
        _registry['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(exc_type: Type[BaseException], func: Callable[[], Any],
                  message: Optional[str] = None) -> BaseException:
    """call func and require it to raise exc_type. returns the caught exception."""
    try:
        func()
    except exc_type as e:
        return e
    raise SuiteAssertionError(message or f"expected {exc_type.__name__} to be raised")


def run(title: str = "test run", verbose_errors: bool = False) -> bool:
    """run every registered test, print a report, and return whether all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    results = []
    for item in _registry['tests']:
        error = None
        try:
            item['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose_errors:
                traceback.print_exc()

        results.append({'passed': error is None, 'description': item['description'], 'error': error})

        if error is None:
            print(f"  {_c.ok}ok{_c.reset}    {item['description']}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {item['description']}")
            print(f"        {_c.grey}{error}{_c.reset}")

    _registry['results'] = results
    _print_summary(start_time)

    # clear so several suites can run from one script
    _registry['tests'] = []
    return all(r['passed'] for r in results)


def _print_summary(start_time: float) -> None:
    duration = (time.perf_counter() - start_time) * 1000
    results = _registry['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count
    color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{color}ran {total} tests in {duration:.2f}ms: "
          f"{passed_count} passed, {failed_count} failed{_c.reset}\n")
