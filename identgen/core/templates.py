"""
Template engine wrapper for code generation.

Exposes the identifier normalizer and the type resolver of a target language
as Jinja2 filters, so emitter templates can write
``{{ field.name | public_name }} {{ field.type | type_ref }}``.
"""

from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateError as JinjaError

from ..logging_config import get_logger
from .language import TargetLanguage

logger = get_logger(__name__)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for a Jinja2 environment bound to one target language."""

    def __init__(self, language: TargetLanguage):
        """
        Initialize template engine.

        Args:
            language: Target language providing identifiers and type names
        """
        self.language = language
        self._env = Environment(
            loader=DictLoader({}),
            autoescape=False,
            keep_trailing_newline=True,
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=StrictUndefined,
        )

        self._env.filters["public_name"] = self._public_name_filter
        self._env.filters["private_name"] = self._private_name_filter
        self._env.filters["native_type"] = language.native_type_name
        self._env.filters["type_name"] = language.type_name
        self._env.filters["type_ref"] = language.type_reference

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        self._env.loader.mapping[name] = content

    def template_exists(self, name: str) -> bool:
        """Check if a template has been added."""
        return name in self._env.loader.mapping

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template with the given context.

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaError as e:
            logger.error("Failed to render template %s: %s", template_name, e)
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Raises:
            TemplateError: If the template fails to parse or render
        """
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except JinjaError as e:
            logger.error("Failed to render template string: %s", e)
            raise TemplateError(f"Failed to render template string: {e}") from e

    # Template filters

    def _public_name_filter(self, value: Any) -> str:
        return self.language.identifier(str(value), True)

    def _private_name_filter(self, value: Any) -> str:
        return self.language.identifier(str(value), False)


def create_template_engine(
    language: Optional[TargetLanguage] = None,
    templates: Optional[Dict[str, str]] = None,
) -> TemplateEngine:
    """
    Create a template engine, defaulting to the Go target language.

    Args:
        language: Target language instance
        templates: Named templates to preload
    """
    if language is None:
        from ..languages.go import GoLanguage

        language = GoLanguage()

    engine = TemplateEngine(language)
    for name, content in (templates or {}).items():
        engine.add_template(name, content)
    return engine
