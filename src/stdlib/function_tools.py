"""
nativekit function helpers
Composition, memoisation, delayed and single-shot calls
"""

import functools
import inspect
import logging
import threading
from typing import Any, Callable, Dict, Optional

from descriptors import identity_of
from object_types import is_object

logger = logging.getLogger('nativekit.function_tools')

def _positional_arity(func: Callable) -> Optional[int]:
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY,
                          inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count

def call_flexible(func: Callable, *args) -> Any:
    """Call func with as many leading arguments as it accepts"""
    if not callable(func):
        raise TypeError(f"{func!r} is not a function")
    arity = _positional_arity(func)
    if arity is not None:
        args = args[:arity]
    return func(*args)

def is_function(func: Any) -> bool:
    """Check whether value is callable"""
    return callable(func)

def compose(*funcs) -> Callable:
    """Compose functions right to left: compose(f, g)(x) == f(g(x))"""
    if len(funcs) == 1 and isinstance(funcs[0], (list, tuple)):
        funcs = tuple(funcs[0])
    for func in funcs:
        if not callable(func):
            raise TypeError("All arguments must be functions")

    def composite(arg):
        for func in reversed(funcs):
            arg = func(arg)
        return arg
    return composite

def _default_ident(value: Any) -> str:
    if is_object(value):
        return f"#{identity_of(value)}"
    return repr(value)

def cache(func: Callable, time: Optional[float] = None,
          ident: Optional[Callable[[Any], str]] = None) -> Callable:
    """
    Memoise func per argument list.

    ``time`` is the lifetime of each entry in milliseconds; a cache hit
    restarts the entry's timer. Objects are keyed by identity, other values
    by ``repr`` unless ``ident`` maps arguments to keys.
    """
    if not callable(func):
        raise TypeError("First argument must be a function")
    ident = ident or _default_ident
    store: Dict[str, Any] = {}
    timers: Dict[str, threading.Timer] = {}
    lock = threading.RLock()

    def expire(key, timer):
        with lock:
            # a re-hit may have replaced this timer before it fired
            if timers.get(key) is not timer:
                return
            store.pop(key, None)
            timers.pop(key, None)
        logger.debug("Cache entry %s expired", key)

    @functools.wraps(func)
    def wrapper(*args):
        key = '(' + ','.join(str(ident(arg)) for arg in args) + ')'
        with lock:
            hit = key in store
            if hit:
                result = store[key]
                timer = timers.pop(key, None)
                if timer is not None:
                    timer.cancel()
        if not hit:
            result = func(*args)
            with lock:
                store[key] = result
        if time is not None and time > 0:
            timer = threading.Timer(time / 1000.0, expire)
            timer.args = (key, timer)
            timer.daemon = True
            with lock:
                previous = timers.get(key)
                if previous is not None:
                    previous.cancel()
                timers[key] = timer
                timer.start()
        return result

    def clear():
        with lock:
            for timer in timers.values():
                timer.cancel()
            timers.clear()
            store.clear()

    wrapper.cache = store
    wrapper.timers = timers
    wrapper.clear = clear
    return wrapper

def delay(func: Callable, callback: Callable, time: float, *args) -> threading.Timer:
    """After time milliseconds call func, then callback(result, *args)"""
    if not callable(func) or not callable(callback):
        raise TypeError("Arguments must be functions")

    def fire():
        callback(func(), *args)

    timer = threading.Timer(max(time, 0) / 1000.0, fire)
    timer.daemon = True
    timer.start()
    return timer

def once(func: Callable, *bound) -> Callable:
    """Call func the first time only; later calls return the first result"""
    if not callable(func):
        raise TypeError("First argument must be a function")
    lock = threading.Lock()
    state = {'called': False, 'value': None}

    @functools.wraps(func)
    def wrapper(*args):
        with lock:
            if not state['called']:
                state['value'] = func(*(bound + args))
                state['called'] = True
            return state['value']
    return wrapper

def bind(func: Callable, *args, **kwargs) -> Callable:
    """Partially apply leading arguments"""
    if not callable(func):
        raise TypeError(f"{func!r} is not a function")
    return functools.partial(func, *args, **kwargs)
