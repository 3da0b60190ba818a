"""
Environment variable overrides for remote-driver configuration.

Every option of every section can be set as
``REMOTE_DRIVER_<SECTION>_<OPTION>``, e.g.
``REMOTE_DRIVER_SERVICE_STARTUP_TIMEOUT=10``. List options take
comma-separated values.
"""

import os
from typing import Any, Callable, Mapping, Optional, get_origin

from pydantic import BaseModel

from .defaults import ENV_PREFIX
from .options import ServiceOptions, TransportOptions

SECTIONS: dict[str, type[BaseModel]] = {
    "service": ServiceOptions,
    "transport": TransportOptions,
}


def env_var(section: str, option: str, prefix: str = ENV_PREFIX) -> str:
    """Name of the variable that sets ``section.option``."""
    return f"{prefix}{section}_{option}".upper()


def _split(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _converter(annotation: Any) -> Callable[[str], Any]:
    if annotation is float:
        return float
    if get_origin(annotation) is list:
        return _split
    return str


def load_env_config(environ: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
    """Collect the options set in the environment.

    Args:
        environ: Variables to read. Defaults to ``os.environ``.

    Returns:
        Nested dictionary holding only the options that were set.

    Raises:
        ValueError: If a variable cannot be converted to its option's type.
    """
    environ = os.environ if environ is None else environ
    result: dict[str, Any] = {}

    for section, model in SECTIONS.items():
        for option, field in model.model_fields.items():
            name = env_var(section, option)
            raw = environ.get(name)
            if raw is None:
                continue
            try:
                value = _converter(field.annotation)(raw)
            except ValueError as e:
                raise ValueError(f"{name}={raw!r}: {e}") from e
            result.setdefault(section, {})[option] = value

    return result
