"""
Template catalog for resume rendering.

Templates are defined in templates.yaml: a `defaults` block merged (OmegaConf)
under each entry of `templates`, so variants only list their differences.
The registry caches merged configs and hands out a fresh StyleConfig per call,
so no two renders ever share style objects.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

from quill.contexts.templating.exceptions import UnknownTemplateError
from quill.contexts.templating.style_config import StyleConfig

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("QUILL_TEMPLATES_PATH", str(Path(__file__).parent / "templates.yaml"))
)
DEFAULT_TEMPLATE = os.getenv("QUILL_DEFAULT_TEMPLATE", "standard")


@dataclass(frozen=True)
class TemplateInfo:
    """Catalog entry shown to callers choosing a template."""

    id: str
    name: str
    description: str


class TemplateRegistry:
    """
    Registry for loading and caching template style configurations.

    Example:
        registry = TemplateRegistry()
        style = registry.get_style("classic")
        [info.id for info in registry.list_templates()]
    """

    def __init__(self, config_path: Path = None):
        """
        Initialize the template registry.

        Args:
            config_path: Catalog YAML path. Defaults to QUILL_TEMPLATES_PATH from
                         environment, else the packaged templates.yaml
        """
        if config_path is None:
            config_path = TEMPLATES_PATH

        self.config_path = Path(config_path)
        self._catalog: Dict[str, Any] = None
        self._cache: Dict[str, Dict[str, Any]] = {}

    def _load_catalog(self) -> Dict[str, Any]:
        if self._catalog is None:
            if not self.config_path.exists():
                raise FileNotFoundError(f"Template catalog not found at {self.config_path}")
            self._catalog = OmegaConf.load(self.config_path)
            if "templates" not in self._catalog:
                raise ValueError(f"Template catalog must contain 'templates': {self.config_path}")
        return self._catalog

    @property
    def template_ids(self) -> List[str]:
        return list(self._load_catalog()["templates"].keys())

    def get_config(self, template_id: str) -> Dict[str, Any]:
        """
        Get a template's merged config dict, loading and caching it if necessary.

        Args:
            template_id: Template id (e.g., 'classic')

        Returns:
            Plain dict of the defaults merged with the template entry

        Raises:
            UnknownTemplateError: If the id is not in the catalog
        """
        if template_id in self._cache:
            return self._cache[template_id]

        catalog = self._load_catalog()
        if template_id not in catalog["templates"]:
            raise UnknownTemplateError(template_id, self.template_ids)

        defaults = catalog.get("defaults", OmegaConf.create({}))
        merged = OmegaConf.merge(defaults, catalog["templates"][template_id])
        config = OmegaConf.to_container(merged, resolve=True)

        self._cache[template_id] = config
        return config

    def get_style(self, template_id: str = None) -> StyleConfig:
        """
        Build a StyleConfig for a template.

        Args:
            template_id: Template id (default: QUILL_DEFAULT_TEMPLATE)

        Returns:
            New StyleConfig instance
        """
        if template_id is None:
            template_id = DEFAULT_TEMPLATE
        return StyleConfig.from_dict(template_id, self.get_config(template_id))

    def list_templates(self) -> List[TemplateInfo]:
        """Enumerate the catalog as {id, name, description} entries, in file order."""
        infos = []
        for template_id in self.template_ids:
            config = self.get_config(template_id)
            infos.append(
                TemplateInfo(
                    id=template_id,
                    name=config.get("name", template_id.capitalize()),
                    description=config.get("description", ""),
                )
            )
        return infos

    def clear_cache(self):
        """Clear the config cache (the catalog file is re-read on next access)."""
        self._cache.clear()
        self._catalog = None

    def is_cached(self, template_id: str) -> bool:
        """
        Check if a template config is in the cache.

        Args:
            template_id: Template id

        Returns:
            True if cached, False otherwise
        """
        return template_id in self._cache
