from abc import ABC, abstractmethod
from typing import List


class ReaderPort(ABC):
    @abstractmethod
    def read(self) -> List[int]:
        """read integer observations"""
        pass

    @abstractmethod
    def close(self):
        """close reader."""
        pass
