"""
Prepending of model data to page templates.

All page and widget models are concatenated into one JavaScript file ahead
of time. Page templates get that file wrapped in an inline-logic block in
front of their own markup, so the model variables are in scope.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from vashstatic.core.logging import get_logger

logger = get_logger(__name__)


def wrap_models(models: str) -> str:
    """Wrap model source in an inline-logic block."""
    return "@{\n" + models + "\n}\n\n"


class ModelPrepender:
    """
    Prepends the models file to page templates.

    The file is read once and kept on the instance; pass ``refresh=True``
    to :meth:`prepend` after the models have changed.
    """

    def __init__(self, models_path: Optional[str | Path], page_dir_type: str = "pg"):
        self.models_path = Path(models_path) if models_path else None
        self.page_dir_type = page_dir_type
        self._models: Optional[str] = None

    def prepend(self, dir_type: str, template: str, refresh: bool = False) -> str:
        """
        Prepend the models to ``template`` when it is a page.

        Args:
            dir_type: Module type of the template
            template: Template contents
            refresh: Re-read the models file instead of using the stored copy

        Returns:
            Models followed by the template for pages, else the template
        """
        if self.models_path is None:
            logger.warning("Could not prepend any models, as no models path was given")
            return template

        if self._models is None or refresh:
            if not self.models_path.exists():
                logger.warning(
                    "Could not prepend any models, as the models file could not be found",
                    extra={"extra_data": {"models_path": str(self.models_path)}},
                )
                return template

            try:
                self._models = wrap_models(self.models_path.read_text(encoding="utf-8"))
            except OSError as exc:
                logger.warning(
                    f"Could not read models file: {exc}",
                    extra={"extra_data": {"models_path": str(self.models_path)}},
                )
                self._models = ""

        return self._models + template if dir_type == self.page_dir_type else template
