"""
Template pipeline - normalize, compile and cache templates.

Orchestrates:
1. Load template (from disk or given contents)
2. Normalize Razor syntax (SyntaxNormalizer)
3. Prepend models to page templates
4. Compile with the external engine
5. Install and store in the JSON template cache
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from vashstatic.core.config import NormalizerOptions, Settings, get_settings
from vashstatic.core.errors import ConfigError
from vashstatic.core.logging import get_context_logger, get_logger
from vashstatic.translator.normalizer import NormalizeResult, SyntaxNormalizer

from .cache import TemplateCache, load_cache
from .compiler import CompileOptions, CompiledTemplate, TemplateCompiler
from .helpers import load_helpers, resolve_helpers
from .models import ModelPrepender
from .paths import get_dir_type_from_path, slash, template_name

logger = get_logger(__name__)


@dataclass
class PrecompiledTemplate:
    """A compiled template ready to be written to the cache."""

    name: str
    """Template name, e.g. 'pg_home/Index'"""

    contents: str
    """Client string of the compiled render function"""

    warnings: List[str] = field(default_factory=list)
    """Normalization warnings"""


@dataclass
class RenderResult:
    """Result of rendering a cached page."""

    success: bool
    contents: str = ""
    errors: List[str] = field(default_factory=list)


class TemplatePipeline:
    """
    Normalize, compile and cache Vash templates.

    Holds no global state: ignore markers, page type and compiler options
    all come from the settings given at construction.
    """

    def __init__(
        self,
        compiler: TemplateCompiler,
        settings: Optional[Settings] = None,
        normalizer: Optional[SyntaxNormalizer] = None,
    ):
        """
        Initialize pipeline.

        Args:
            compiler: Template compilation engine
            settings: Settings (uses the cached process settings if None)
            normalizer: Syntax normalizer (built from settings if None)
        """
        self.compiler = compiler
        self.settings = settings or get_settings()
        self.normalizer = normalizer or SyntaxNormalizer(
            NormalizerOptions.from_settings(self.settings)
        )
        self._prependers: Dict[str, ModelPrepender] = {}

    @property
    def page_dir_type(self) -> str:
        return self.settings.PAGE_DIR_TYPE

    def compile_options(self, debug: bool = False) -> CompileOptions:
        return CompileOptions.from_settings(self.settings, debug=debug)

    def normalize_template(
        self,
        tmpl_path: Optional[str | Path] = None,
        dest: Optional[str | Path] = None,
        contents: Optional[str] = None,
    ) -> NormalizeResult:
        """
        Normalize a template and optionally save it.

        Args:
            tmpl_path: File to read the template from
            dest: Optional destination for the normalized template
            contents: Template contents; skips reading ``tmpl_path``

        Returns:
            NormalizeResult

        Raises:
            ConfigError: If neither ``tmpl_path`` nor ``contents`` is given
        """
        if contents is None:
            if tmpl_path is None:
                raise ConfigError("Either a template path or contents must be given", field="tmpl_path")
            contents = Path(tmpl_path).read_text(encoding="utf-8")

        result = self.normalizer.normalize(contents)

        if dest:
            dest = Path(dest)
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(result.text, encoding="utf-8")

        return result

    def compile_template(self, text: str, debug: bool = False) -> CompiledTemplate:
        return self.compiler.compile(text, self.compile_options(debug))

    def set_helpers(self, helpers: Optional[Iterable[str | Path]] = None) -> int:
        """Load the default helpers, overridden or extended by ``helpers``."""
        return load_helpers(
            resolve_helpers(helpers),
            self.compiler,
            self.compile_options(),
            normalizer=self.normalizer,
        )

    def get_template_from_cache(self, name: str, cache_path: str | Path) -> Optional[CompiledTemplate]:
        """
        Install every cached template and return the one named ``name``.

        Args:
            name: Template name, as stored in the cache
            cache_path: Path to the JSON template cache

        Returns:
            The render function, or None if the cache or the name is missing
        """
        cache = load_cache(cache_path)
        if not cache:
            return None

        installed: Dict[str, CompiledTemplate] = {}
        for cached_name, client_string in cache.items():
            installed[cached_name] = self.compiler.load(client_string)
            self.compiler.install(cached_name, installed[cached_name])

        return installed.get(name)

    def _prepender(self, models_path: Optional[str | Path]) -> ModelPrepender:
        key = str(models_path)
        if key not in self._prependers:
            self._prependers[key] = ModelPrepender(models_path, self.page_dir_type)
        return self._prependers[key]

    def precompile(
        self,
        file: str | Path,
        models_path: Optional[str | Path] = None,
        dir_types: Optional[List[str]] = None,
        debug: bool = False,
    ) -> PrecompiledTemplate:
        """
        Precompile a single template.

        The template name is derived from the file's type directory and
        module, e.g. 'wg_appHeader/navItem' or 'pg_home/home'.

        Args:
            file: Path to the template
            models_path: Combined models file to prepend to pages
            dir_types: Candidate type directories (defaults to settings)
            debug: Compile with debugging info

        Returns:
            PrecompiledTemplate

        Raises:
            FileNotFoundError: If ``file`` does not exist
        """
        path = Path(file)
        if not path.exists():
            raise FileNotFoundError(f"Template file not found: {path}")

        file_path = slash(str(path))
        dir_type = get_dir_type_from_path(
            file_path, dir_types or self.settings.DIR_TYPES, default=self.page_dir_type
        )
        name = template_name(dir_type, file_path)
        log = get_context_logger(__name__, template=name)

        result = self.normalize_template(path)
        text = self._prepender(models_path).prepend(dir_type, result.text)

        compiled = self.compile_template(text, debug)
        self.compiler.install(name, compiled)
        log.info("Precompiled template")

        return PrecompiledTemplate(
            name=name, contents=compiled.to_client_string(), warnings=result.warnings
        )

    def update_cache(
        self,
        tmpl_path: str | Path,
        cache_path: str | Path,
        dir_type: Optional[str] = None,
        contents: Optional[str] = None,
        models_path: Optional[str | Path] = None,
        debug: bool = False,
    ) -> str:
        """
        Precompile a template and replace its entry in the cache.

        Meant to run from a file watcher. When ``contents`` is omitted the
        change is assumed to be in the models, so they are re-read.

        Args:
            tmpl_path: Template path, used for the name and, without
                ``contents``, as the source
            cache_path: Path to the JSON template cache
            dir_type: Module type (defaults to the page type)
            contents: Template contents, saves a read from disk
            models_path: Combined models file to prepend to pages
            debug: Compile with debugging info

        Returns:
            The template's cache name
        """
        if not dir_type:
            logger.warning(
                f"No template type given, defaulting to '{self.page_dir_type}'",
                extra={"extra_data": {"tmpl_path": str(tmpl_path)}},
            )
            dir_type = self.page_dir_type

        refresh_models = contents is None

        result = self.normalize_template(tmpl_path, contents=contents)
        text = self._prepender(models_path).prepend(dir_type, result.text, refresh=refresh_models)

        compiled = self.compile_template(text, debug)
        name = template_name(dir_type, slash(str(tmpl_path)))

        # Runtime and on-disk caches are both updated
        self.compiler.install(name, compiled)
        TemplateCache(cache_path).update(name, compiled.to_client_string())

        return name

    def render_page(
        self,
        cache_path: str | Path,
        page_name: str,
        helpers: Optional[Iterable[str | Path]] = None,
        model: Any = None,
    ) -> RenderResult:
        """
        Render a cached page template by name.

        Args:
            cache_path: Path to the JSON template cache
            page_name: Page module name, e.g. 'about/Index'
            helpers: Custom helper templates
            model: Model passed to the render function

        Returns:
            RenderResult
        """
        self.set_helpers(helpers)

        template = self.get_template_from_cache(f"{self.page_dir_type}_{page_name}", cache_path)
        if template is None:
            return RenderResult(
                success=False,
                errors=[
                    "Stopping 'render_page' early. Seems like that page doesn't have a "
                    "precompiled template. Try pre-compiling first.",
                    page_name,
                ],
            )

        return RenderResult(success=True, contents=template(model))
