from abc import ABCMeta, abstractmethod

from ecs_container_metadata.domain.container_metadata import ContainerMetadata


class ContainerMetadataSource(metaclass=ABCMeta):
    @abstractmethod
    def fetch_container_metadata(self) -> ContainerMetadata:
        pass
