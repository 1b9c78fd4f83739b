"""Mapping between the version 4 container metadata response and the domain model.

The response format is documented at
https://docs.aws.amazon.com/AmazonECS/latest/developerguide/task-metadata-endpoint-v4-response.html
Only the fields below are read; anything else in the document is ignored.
"""
from typing import Any, Dict

from ecs_container_metadata.domain.container_metadata import ContainerMetadata, ContainerLabels, ContainerLimits
from ecs_container_metadata.domain.metadata_parse_exception import MetadataParseException

DOCKER_ID_KEY = 'DockerId'
IMAGE_KEY = 'Image'
LABELS_KEY = 'Labels'
LIMITS_KEY = 'Limits'

# Field name -> wire key
CONTAINER_LABEL_KEYS = dict(
    cluster='com.amazonaws.ecs.cluster',
    container_name='com.amazonaws.ecs.container-name',
    task_arn='com.amazonaws.ecs.task-arn',
    task_definition_family='com.amazonaws.ecs.task-definition-family',
    task_definition_version='com.amazonaws.ecs.task-definition-version',
)

CONTAINER_LIMIT_KEYS = dict(
    cpu='CPU',
    mem='Memory',
)

MAX_LIMIT_VALUE = 65535


def parse_container_metadata(document: Any) -> ContainerMetadata:
    container = _require_object(document, 'container metadata')
    labels = _require_object(_require_field(container, LABELS_KEY, LABELS_KEY), LABELS_KEY)
    limits = _require_object(_require_field(container, LIMITS_KEY, LIMITS_KEY), LIMITS_KEY)

    return ContainerMetadata(
        docker_id=_require_string(container, DOCKER_ID_KEY, DOCKER_ID_KEY),
        image=_require_string(container, IMAGE_KEY, IMAGE_KEY),
        labels=ContainerLabels(**{
            field_name: _require_string(labels, key, f'{LABELS_KEY}.{key}')
            for field_name, key in CONTAINER_LABEL_KEYS.items()
        }),
        limits=ContainerLimits(**{
            field_name: _require_limit(limits, key, f'{LIMITS_KEY}.{key}')
            for field_name, key in CONTAINER_LIMIT_KEYS.items()
        })
    )


def _require_object(value: Any, description: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise MetadataParseException(f'Expected {description} to be a JSON object but got {type(value).__name__}')

    return value


def _require_field(container: Dict[str, Any], key: str, path: str) -> Any:
    if key not in container:
        raise MetadataParseException(f'Container metadata is missing required field "{path}"')

    return container[key]


def _require_string(container: Dict[str, Any], key: str, path: str) -> str:
    value = _require_field(container, key, path)

    if not isinstance(value, str):
        raise MetadataParseException(
            f'Container metadata field "{path}" must be a string but got {type(value).__name__}'
        )

    return value


def _require_limit(container: Dict[str, Any], key: str, path: str) -> int:
    value = _require_field(container, key, path)

    # bool is a subclass of int but true/false are not valid limits
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_LIMIT_VALUE:
        return value

    raise MetadataParseException(
        f'Container metadata field "{path}" must be an integer between 0 and {MAX_LIMIT_VALUE} but got {value!r}'
    )
