from abc import ABC, abstractmethod

class WriterPort(ABC):
    @abstractmethod
    def write(self, text: str):
        """ write text"""
        pass

    def close(self):
        """ Close writer. """
        pass
