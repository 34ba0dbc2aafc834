from abc import ABC, abstractmethod

class IFilenameSanitizer(ABC):
    """
    Contract for turning untrusted text (beatmap titles, artists) into a
    single path component.
    """
    @abstractmethod
    def escape(self, text: str) -> str:
        """
        Deterministically escapes text. The result must never contain a path separator.
        """
        pass

    @abstractmethod
    def unescape(self, text: str) -> str:
        """
        Reverses escape(). Only used for debugging / tests.
        """
        pass
