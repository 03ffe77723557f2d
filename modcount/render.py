"""Text rendering of CLI reports from the package's Jinja2 templates."""

from collections.abc import Iterable

import typing
import jinja2


def format_digits(values: Iterable[int], separator: str = " ") -> str:
    """One counter reading, least significant digit first."""
    return separator.join(str(v) for v in values)


_env = jinja2.Environment(
    loader=jinja2.PackageLoader("modcount", "templates"),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=jinja2.StrictUndefined,
)
_env.filters["digits"] = format_digits


def render(template_name: str, **kwargs: typing.Any) -> str:
    return _env.get_template(template_name).render(**kwargs)
