from abc import ABC, abstractmethod

from metatron.types import PathType


class BaseFilterRules(ABC):
    """
    Abstract base class defining the interface for scan filter rules.

    Filter rules decide which entries a scan leaves out. Extension rules look at
    file names while folder rules look at directory paths, but both answer the
    same question through exclude(). An instance without any configured rules
    excludes nothing.

    Example:
        >>> from metatron.filters.extension_rules import ExtensionFilterRules
        >>> rules = ExtensionFilterRules(".md")
        >>> rules.exclude("README.md")
        False
        >>> rules.exclude("main.py")
        True
        >>> from metatron.filters.folder_rules import FolderExclusionRules
        >>> folders = FolderExclusionRules(["node_modules"])
        >>> folders.exclude("/srv/app/node_modules")
        True
        >>> folders.has_rules()
        True
    """

    @abstractmethod
    def exclude(self, path: PathType) -> bool:
        """
        Determine if a given entry should be left out of the scan results.

        Args:
            path: The file name or directory path to check. What part of the path
                is inspected depends on the concrete rule type.

        Returns:
            bool: True if the entry should be excluded, False if it should be kept.
        """
        pass

    @abstractmethod
    def has_rules(self) -> bool:
        """
        Check whether any rules are configured.

        Returns:
            bool: True if at least one rule can exclude an entry, False otherwise.
        """
        pass
