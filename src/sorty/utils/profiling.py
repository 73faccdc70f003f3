"""Profiling support for sorty using cProfile.

When the SORTY_PROFILE environment variable is set to a directory path, the
command-line entry point runs under cProfile and its statistics are written
to {SORTY_PROFILE}/{timestamp_ms}_{pid}/{prefix}_{pid}_{seq}.prof.
"""
import cProfile
import functools
import itertools
import os
import time
from pathlib import Path
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec('P')
T = TypeVar('T')

PROFILE_ENVIRONMENT_VARIABLE = 'SORTY_PROFILE'

_profile_counter = itertools.count()


def get_profile_dir() -> Path | None:
    """Get the session profile directory, or None if profiling is disabled."""
    profile_path = os.environ.get(PROFILE_ENVIRONMENT_VARIABLE)
    if not profile_path:
        return None
    return Path(profile_path) / f"{int(time.time() * 1000)}_{os.getpid()}"


def generate_profile_filename(prefix: str = "profile") -> str:
    """Generate a filename like "main_54398_0.prof", unique within the process."""
    return f"{prefix}_{os.getpid()}_{next(_profile_counter)}.prof"


def profile_function(func: Callable[P, T], prefix: str = "profile") -> Callable[P, T]:
    """Wrap func so that each call is profiled if SORTY_PROFILE is set.

    Args:
        func: Function to profile
        prefix: Prefix for the profile filename

    Returns:
        Wrapped function that profiles if environment variable is set
    """
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        profile_dir = get_profile_dir()

        if profile_dir is None:
            return func(*args, **kwargs)

        profile_dir.mkdir(parents=True, exist_ok=True)
        profile_file = profile_dir / generate_profile_filename(prefix)

        profiler = cProfile.Profile()
        try:
            profiler.enable()
            return func(*args, **kwargs)
        finally:
            profiler.disable()
            profiler.dump_stats(str(profile_file))

    return wrapper


def profile_main(func: Callable[P, T]) -> Callable[P, T]:
    """Decorator for the main entry point function; profiles with prefix "main"."""
    return profile_function(func, prefix="main")
