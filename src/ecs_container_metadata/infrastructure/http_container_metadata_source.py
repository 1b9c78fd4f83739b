from logging import Logger

import requests
from requests import RequestException, Response, HTTPError

from ecs_container_metadata.domain.container_metadata import ContainerMetadata
from ecs_container_metadata.domain.container_metadata_source import ContainerMetadataSource
from ecs_container_metadata.domain.metadata_http_exception import MetadataHttpException
from ecs_container_metadata.domain.metadata_parse_exception import MetadataParseException
from ecs_container_metadata.domain.metadata_uri_source import MetadataUriSource
from ecs_container_metadata.infrastructure.container_metadata_document import parse_container_metadata


class HttpContainerMetadataSource(ContainerMetadataSource):
    def __init__(self, metadata_uri_source: MetadataUriSource, logger: Logger):
        self.__metadata_uri_source = metadata_uri_source
        self.__logger = logger

    def fetch_container_metadata(self) -> ContainerMetadata:
        metadata_uri = self.__metadata_uri_source.get_metadata_uri()

        self.__logger.debug('Fetching container metadata from %s...', metadata_uri)

        try:
            response = requests.get(metadata_uri)
            self.__raise_for_unsuccessful_status(response)
        except RequestException as request_exception:
            raise MetadataHttpException(f'HTTP error: {request_exception}') from request_exception

        try:
            document = response.json()
        except (ValueError, RecursionError) as decoding_error:
            raise MetadataParseException(
                f'Container metadata response body is not valid JSON: {decoding_error}'
            ) from decoding_error

        container_metadata = parse_container_metadata(document)

        self.__logger.debug('Container metadata fetched.')

        return container_metadata

    @staticmethod
    def __raise_for_unsuccessful_status(response: Response) -> None:
        response.raise_for_status()

        # raise_for_status only covers 4xx and 5xx
        if not 200 <= response.status_code < 300:
            raise HTTPError(f'{response.status_code} Unexpected Status for url: {response.url}', response=response)
