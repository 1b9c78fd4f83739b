from ecs_container_metadata.domain.container_metadata import ContainerMetadata, ContainerLabels, ContainerLimits


def any_container_metadata() -> ContainerMetadata:
    return a_container_metadata_with()


def a_container_metadata_with(task_arn: str = 'arn:aws:ecs:eu-west-2:123456789012:task/any-cluster/any-id',
                              cluster: str = 'any-cluster', container_name: str = 'any-container',
                              task_definition_family: str = 'any-family',
                              task_definition_version: str = '1') -> ContainerMetadata:
    return ContainerMetadata(
        docker_id='any-docker-id',
        image='any-repository:any-tag',
        labels=ContainerLabels(
            cluster=cluster,
            container_name=container_name,
            task_arn=task_arn,
            task_definition_family=task_definition_family,
            task_definition_version=task_definition_version
        ),
        limits=ContainerLimits(cpu=256, mem=512)
    )
