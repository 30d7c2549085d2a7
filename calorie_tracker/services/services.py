from abc import ABC, abstractmethod

class BaseService(ABC):
    """
    Interface for services backed by a recognition model.
    """

    @abstractmethod
    def __init__(self):
        pass

    @abstractmethod
    def analyze(self, image_bytes: bytes) -> dict:
        pass
