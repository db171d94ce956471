"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with the built-in templates that frame a generated component.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, select_autoescape


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        self.template_dir = template_dir
        self._templates: Dict[str, str] = {}
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        # Files in template_dir take precedence over in-memory templates
        loaders = []
        if self.template_dir and self.template_dir.exists():
            loaders.append(FileSystemLoader(str(self.template_dir)))
        loaders.append(DictLoader(self._templates))

        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(["html", "xml"]),
            lstrip_blocks=True,
        )

        self._env.filters["comment"] = self._comment_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        self._templates[name] = content

    # Template filters for code generation

    def _comment_filter(self, value: str, style: str = "//") -> str:
        """Add comment markers to each line."""
        lines = str(value).split("\n")
        return "\n".join(f"{style} {line}" if line.strip() else line for line in lines)


# Built-in templates

VUE_SFC_TEMPLATE = """\
{% if header %}<!-- {{ header }} -->
{% endif %}<script>
{{ script }}
</script>
"""

JS_MODULE_TEMPLATE = """\
{% if header %}{{ header | comment }}
{% endif %}{{ script }}
"""

BUILTIN_TEMPLATES = {
    "component.vue": VUE_SFC_TEMPLATE,
    "component.js": JS_MODULE_TEMPLATE,
}


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """
    Create a template engine preloaded with the built-in templates.

    Args:
        template_dir: Optional directory whose templates replace built-ins
            of the same name
    """
    engine = TemplateEngine(template_dir)
    for name, content in BUILTIN_TEMPLATES.items():
        engine.add_template(name, content)
    return engine
