from typing import Any, cast

import requests

from models import HierarchyNode, HierarchyStatistics
from repositories import HierarchyRepository

from .base import RestBaseRepository
from .util import TokenProvider, from_json


class RestHierarchyRepository(HierarchyRepository, RestBaseRepository):
    def __init__(self, base_url: str, token_provider: TokenProvider | None, timeout: float | None = None) -> None:
        RestBaseRepository.__init__(self, base_url, token_provider, timeout)

    def get_tree(self) -> list[HierarchyNode]:
        resp = self.authenticated_get(f'{self.base_url}/api/hierarchy/tree')

        if resp.status_code == requests.codes.ok:
            json = cast(list[dict[str, Any]], resp.json())
            return [from_json(HierarchyNode, node) for node in json]

        self.unexpected_error(resp)

    def get_statistics(self) -> HierarchyStatistics:
        resp = self.authenticated_get(f'{self.base_url}/api/hierarchy/statistics')

        if resp.status_code == requests.codes.ok:
            json = cast(dict[str, Any], resp.json())
            return from_json(HierarchyStatistics, json)

        self.unexpected_error(resp)
