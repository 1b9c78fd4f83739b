from abc import ABCMeta, abstractmethod


class MetadataUriSource(metaclass=ABCMeta):
    @abstractmethod
    def get_metadata_uri(self) -> str:
        pass
