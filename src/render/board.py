"""Jinja2-based template renderer for the session board."""

from pathlib import Path
from typing import Literal

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.render.view import SessionView

BoardFormat = Literal["markdown", "html"]

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

_EXTENSIONS: dict[str, str] = {
    "markdown": "md.j2",
    "html": "html.j2",
}


class BoardRenderer:
    """Render the session board from Jinja2 templates.

    Supports both Markdown and HTML output formats.
    """

    def __init__(self, template_dir: str | Path = DEFAULT_TEMPLATE_DIR):
        """Initialize renderer with template directory.

        Args:
            template_dir: Path to directory containing .j2 templates.
                          Defaults to the templates shipped with this package.
        """
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "htm", "html.j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(
        self,
        view: SessionView,
        fmt: BoardFormat = "markdown",
        template_name: str = "board",
    ) -> str:
        """Render the board for a session view.

        Args:
            view: Session snapshot to render
            fmt: Output format, "markdown" or "html"
            template_name: Base name of template (without extension)

        Returns:
            Rendered board

        Raises:
            ValueError: If fmt is not a supported format
            TemplateNotFound: If the template file doesn't exist
        """
        if fmt not in _EXTENSIONS:
            msg = f"Unsupported board format: {fmt}"
            raise ValueError(msg)

        template = self.env.get_template(f"{template_name}.{_EXTENSIONS[fmt]}")
        return template.render(view=view.model_dump(mode="json"))

    @staticmethod
    def media_type(fmt: BoardFormat) -> str:
        return "text/html" if fmt == "html" else "text/markdown"
