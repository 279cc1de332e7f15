"""
Building blocks shared by every resource client.

A resource client declares its collection ``path``, the ``model`` its
responses decode into and the ``id_type`` of its identifiers, then mixes in
the operations the API offers for it. Everything funnels into
:meth:`payrex.core.client.HttpClient.execute`.
"""

from __future__ import annotations

from typing import Any, Optional, Type

from ..core.client import HttpClient, RequestDescriptor
from ..core.types import Deleted, List, ListParams, ResourceId

__all__ = [
    "Creatable",
    "Deletable",
    "Listable",
    "ResourceClient",
    "Retrievable",
    "Updatable",
]


class ResourceClient:
    path = ""
    model: Type[Any]
    id_type: Type[ResourceId] = ResourceId

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def _instance_path(self, resource_id: str) -> str:
        return f"{self.path}/{self.id_type(resource_id)}"

    def _request(
        self,
        method: str,
        path: str,
        decode: Any,
        body: Any = None,
        *,
        allow_empty: bool = False,
    ) -> Any:
        return self._http.execute(
            RequestDescriptor(method, path, body, allow_empty=allow_empty), decode
        )

    def _action(self, resource_id: str, name: str, params: Any = None) -> Any:
        """POST to ``<path>/<id>/<name>``, e.g. ``/payment_intents/pi_1/cancel``."""
        return self._request(
            "POST",
            f"{self._instance_path(resource_id)}/{name}",
            self.model.from_response,
            params,
        )


class Creatable(ResourceClient):
    def create(self, params: Any) -> Any:
        return self._request("POST", self.path, self.model.from_response, params)


class Retrievable(ResourceClient):
    def retrieve(self, resource_id: str) -> Any:
        return self._request(
            "GET", self._instance_path(resource_id), self.model.from_response
        )


class Updatable(ResourceClient):
    def update(self, resource_id: str, params: Any) -> Any:
        return self._request(
            "PATCH", self._instance_path(resource_id), self.model.from_response, params
        )


class Deletable(ResourceClient):
    def delete(self, resource_id: str) -> Optional[Deleted]:
        """Delete the resource; ``None`` when the API answers with no body."""
        return self._request(
            "DELETE",
            self._instance_path(resource_id),
            Deleted.from_response,
            allow_empty=True,
        )


class Listable(ResourceClient):
    def list(self, params: Optional[ListParams] = None) -> List[Any]:
        return self._request(
            "GET", self.path, List.decoder(self.model.from_response), params
        )
