# seo_score/base_module.py
from abc import ABC, abstractmethod


class SEOModule(ABC):
    """
    Abstract base class for all SEO analysis modules.
    Each module will implement its own 'analyze' method.
    """

    def __init__(self, config=None):
        self.module_name = self.__class__.__name__
        self.config = config if config else {}  # Store module-specific config
        self.global_config = self.config.get("Global", {})  # Get global config if passed down

    @abstractmethod
    def analyze(self, content: str, focus_keyword: str = "") -> object:
        """
        Analyzes an HTML fragment for the SEO attributes this module covers.

        Args:
            content (str): Raw HTML content, as supplied by the editor.
            focus_keyword (str): The term the content is optimized for. May be empty.

        Returns:
            object: The module's result value object.
        """
        pass

    def get_module_name(self) -> str:
        """Returns the name of the module."""
        return self.module_name

    def is_debug(self) -> bool:
        return bool(self.global_config.get("debug"))
