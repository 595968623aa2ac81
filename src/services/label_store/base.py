from abc import ABC, abstractmethod

# Blocks whose leading label phrase is stripped before extraction. The address
# block needs no catalogue: everything up to its first colon is dropped.
LABELED_BLOCKS = ("recipient", "delivery", "dedication")


class LabelStore(ABC):
    """Abstract interface for the label phrases stripped from capture blocks.

    Phrases are organized by language and block name. For example, the
    Spanish recipient block strips "Nombre y número" and is accessed as
    `get("recipient")` on a store whose language is "es".

    Multi-language support:
    - The `language` property returns the current language code
    - The `fallback_language` property returns the fallback language code
    - When a block has no phrases in the current language, the fallback language is used
    """

    @property
    @abstractmethod
    def language(self) -> str:
        """Current language code (ISO 639-1, e.g., 'es', 'en')."""
        ...

    @property
    @abstractmethod
    def fallback_language(self) -> str:
        """Fallback language code when a block has no phrases."""
        ...

    @abstractmethod
    def get(self, block: str) -> list[str]:
        """Get the label phrases for a block, longest first.

        Args:
            block: Block identifier ('recipient', 'delivery', 'dedication')

        Returns:
            List of phrases; empty if the block is unknown in both languages
        """
        ...

    @abstractmethod
    def list_blocks(self) -> list[str]:
        """List all blocks that have phrases."""
        ...
