"""Core interfaces for adapters."""

from abc import ABC, abstractmethod

from mdbook_section_validator.core.entities import Identity, Verdict


class IssueValidator(ABC):
    """Interface for checking whether a referenced link is still live."""
    
    @abstractmethod
    async def validate(self, issue: Identity) -> Verdict:
        """Return the verdict for one identity. Must not raise."""
        pass
