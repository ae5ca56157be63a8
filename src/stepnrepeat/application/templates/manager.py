"""Template manager for bundled step and repeat configurations."""

from importlib import resources
from pathlib import Path


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> description
TEMPLATE_METADATA: dict[str, str] = {
    "sra3-business-cards": "90 x 50 mm business cards on an SRA3 sheet",
    "a3-postcards": "A6 postcards on an A3 sheet",
    "letter-labels": "2.5 x 1 in labels on US Letter (points)",
}


class TemplateManager:
    """Access to the bundled template configurations.

    Example:
        manager = TemplateManager()
        for name, description in manager.list_templates():
            print(f"{name}: {description}")

        manager.init_template("sra3-business-cards", Path("cards.json"))
    """

    def __init__(self) -> None:
        self._data_package = "stepnrepeat.application.templates.data"

    def list_templates(self) -> list[tuple[str, str]]:
        """List (name, description) pairs for every template."""
        return list(TEMPLATE_METADATA.items())

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA

    def get_template(self, name: str) -> str:
        """Get the JSON content of a template.

        Args:
            name: The template name (without .json extension).

        Returns:
            The template JSON content as a string.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)

        template_file = resources.files(self._data_package).joinpath(f"{name}.json")
        try:
            return template_file.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def init_template(self, name: str, output_path: Path) -> None:
        """Write a template to `output_path`.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            OSError: If the file cannot be written.
        """
        output_path.write_text(self.get_template(name), encoding="utf-8")
