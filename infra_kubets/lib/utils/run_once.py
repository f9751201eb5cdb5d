from functools import wraps
from typing import Callable, Hashable

_sentinel = object()


def run_once(func: Callable) -> Callable:
    """
    Decorator that restricts `func` to execute once per distinct set of positional arguments. Repeated calls with the
    same arguments return the value of the first call.

    Keyed on arguments so that a classmethod decorated with it caches per subclass, not once for the whole hierarchy.

    :param func: The decorated function
    """
    results: dict[tuple[Hashable, ...], object] = {}

    @wraps(func)
    def func_run_once(*args, **kwargs):
        result = results.get(args, _sentinel)

        if result is _sentinel:
            result = results[args] = func(*args, **kwargs)

        return result

    func_run_once.cache_clear = results.clear

    return func_run_once
