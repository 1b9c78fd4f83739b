from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ContainerLabels:
    cluster: str
    container_name: str
    task_arn: str
    task_definition_family: str
    task_definition_version: str


@dataclass(frozen=True)
class ContainerLimits:
    cpu: int
    # 0 means no memory limit was specified for the container
    mem: int


@dataclass(frozen=True)
class ContainerMetadata:
    docker_id: str
    image: str
    labels: ContainerLabels
    limits: ContainerLimits

    @property
    def cluster(self) -> str:
        return self.labels.cluster

    @property
    def container_name(self) -> str:
        return self.labels.container_name

    @property
    def task_arn(self) -> str:
        return self.labels.task_arn

    @property
    def task_id(self) -> Optional[str]:
        """The ECS task ID is the last portion of the task ARN."""
        _, separator, task_id = self.labels.task_arn.rpartition('/')
        return task_id if separator else None

    @property
    def task_definition_family(self) -> str:
        return self.labels.task_definition_family

    @property
    def task_definition_revision(self) -> str:
        return self.labels.task_definition_version
