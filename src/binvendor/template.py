"""
Rendering of the templates used to locate a dependency's distribution and
binaries.

Templates are Jinja2 strings, e.g. ``"tool-{{ version }}-{{ platform_os_name }}{{ ext }}"``.
Only the parameters bound to a template are visible while it renders.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional

import jinja2
from jinja2.sandbox import SandboxedEnvironment

from binvendor.binvendor_exceptions import TemplateError


def _finalize(value: Any) -> Any:
    return "" if value is None else value


_ENVIRONMENT = SandboxedEnvironment(
    undefined=jinja2.StrictUndefined,
    finalize=_finalize,
    keep_trailing_newline=True,
    autoescape=False,
)


class Template:
    """
    An immutable template together with the parameters it will be rendered with.

    Adding parameters never modifies an existing instance, so a base template can
    be shared and extended independently by several callers.
    """

    def __init__(self, source: str, parameters: Optional[Mapping[str, Any]] = None):
        self._source = source
        self._parameters: Mapping[str, Any] = MappingProxyType(dict(parameters or {}))

    @property
    def source(self) -> str:
        return self._source

    @property
    def parameters(self) -> Mapping[str, Any]:
        return self._parameters

    def with_parameter(self, key: str, value: Any) -> "Template":
        """
        Returns a new template with ``key`` bound to ``value``.
        """
        parameters = dict(self._parameters)
        parameters[key] = value
        return Template(self._source, parameters)

    def with_parameters(self, pairs: Mapping[str, Any]) -> "Template":
        """
        Returns a new template with every pair in ``pairs`` bound.
        """
        template = self
        for key, value in pairs.items():
            template = template.with_parameter(key, value)
        return template

    def render(self) -> str:
        """
        Render the template.

        Raises:
            TemplateError: if the template references an unbound parameter or
                is not valid template syntax
        """
        try:
            compiled = _ENVIRONMENT.from_string(self._source)
            return compiled.render(**self._parameters)
        except jinja2.TemplateError as e:
            raise TemplateError(
                f"Failed to render template {self._source!r}: {e}", self._source
            ) from e

    def __repr__(self) -> str:
        return f"Template(source={self._source!r}, parameters={dict(self._parameters)!r})"


def render(source: str, parameters: Optional[Mapping[str, Any]] = None) -> str:
    """Render ``source`` with ``parameters``."""
    return Template(source, parameters).render()
