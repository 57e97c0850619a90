"""Async client for the Miro REST API v2.

Each public method issues exactly one authenticated request, except
:meth:`MiroClient.update_item`, which reads the item first to find the typed
endpoint it must be patched through. Nothing is retried and nothing is cached.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .config import MiroConfig
from .errors import MiroAPIError, UnsupportedItemTypeError
from .models import (
    CardData,
    CardSpec,
    ConnectorSpec,
    DocumentSpec,
    EmbedData,
    EmbedSpec,
    FrameData,
    FrameSpec,
    Geometry,
    ImageSpec,
    ItemSpec,
    ParentRef,
    Position,
    ShapeData,
    ShapeSpec,
    ShapeStyle,
    StickyNoteData,
    StickyNoteSpec,
    StickyNoteStyle,
    TagColor,
    TextData,
    TextGeometry,
    TextSpec,
    TextStyle,
    UrlData,
)

logger = logging.getLogger(__name__)

# Miro exposes mutations per item type rather than on the generic items resource.
ITEM_TYPE_ENDPOINTS: Dict[str, str] = {
    "sticky_note": "sticky_notes",
    "shape": "shapes",
    "text": "texts",
    "card": "cards",
    "connector": "connectors",
    "frame": "frames",
    "image": "images",
    "document": "documents",
    "embed": "embeds",
    "app_card": "app_cards",
}


def _parent(parent_id: Optional[str]) -> Optional[ParentRef]:
    return ParentRef(id=parent_id) if parent_id else None


class MiroClient:
    """Thin translation layer from Python calls to Miro REST requests."""

    def __init__(
        self,
        config: MiroConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config = config
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.token}",
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> Any:
        """Send one request and decode the response.

        Returns ``{}`` for 204 responses, for every DELETE, and for responses
        that are not JSON. Raises :class:`MiroAPIError` on any non-2xx status.
        """
        query = {k: str(v) for k, v in (params or {}).items() if v is not None}
        logger.debug("%s %s params=%s", method, path, query)
        async with httpx.AsyncClient(
            timeout=self._config.timeout, transport=self._transport
        ) as client:
            response = await client.request(
                method,
                f"{self._config.base_url}{path}",
                headers=self._headers(),
                params=query or None,
                json=body,
            )

        if not response.is_success:
            raise MiroAPIError(response.status_code, response.reason_phrase, response.text)

        if response.status_code == 204 or method == "DELETE":
            return {}

        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            return response.json()
        return {}

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("GET", path, params=params)

    async def _post(self, path: str, body: Optional[Any] = None) -> Any:
        return await self._request("POST", path, body=body)

    async def _patch(self, path: str, body: Any) -> Any:
        return await self._request("PATCH", path, body=body)

    async def _delete(self, path: str) -> Dict[str, Any]:
        return await self._request("DELETE", path)

    # ─── Boards ──────────────────────────────────────────────────────────────

    async def get_boards(
        self, query: Optional[str] = None, team_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        response = await self._get("/boards", params={"query": query, "team_id": team_id})
        return response.get("data", [])

    async def get_board(self, board_id: str) -> Dict[str, Any]:
        return await self._get(f"/boards/{board_id}")

    async def create_board(
        self,
        name: str,
        description: Optional[str] = None,
        team_id: Optional[str] = None,
        sharing_policy: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"name": name}
        if description is not None:
            body["description"] = description
        if team_id:
            body["teamId"] = team_id
        if sharing_policy:
            body["sharingPolicy"] = sharing_policy
        return await self._post("/boards", body)

    async def update_board(
        self,
        board_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        sharing_policy: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if name is not None:
            body["name"] = name
        if description is not None:
            body["description"] = description
        if sharing_policy:
            body["sharingPolicy"] = sharing_policy
        return await self._patch(f"/boards/{board_id}", body)

    async def copy_board(
        self,
        board_id: str,
        name: str,
        description: Optional[str] = None,
        team_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"name": name}
        if description is not None:
            body["description"] = description
        if team_id:
            body["teamId"] = team_id
        return await self._post(f"/boards/{board_id}/copy", body)

    async def delete_board(self, board_id: str) -> Dict[str, Any]:
        return await self._delete(f"/boards/{board_id}")

    # ─── Items ───────────────────────────────────────────────────────────────

    async def get_board_items_page(
        self,
        board_id: str,
        item_type: Optional[str] = None,
        parent_item_id: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Fetch one page of items. The response carries ``data`` and ``cursor``."""
        params = {
            "type": item_type,
            "parent_item_id": parent_item_id,
            "cursor": cursor,
            "limit": limit,
        }
        return await self._get(f"/boards/{board_id}/items", params=params)

    async def get_board_items(
        self,
        board_id: str,
        item_type: Optional[str] = None,
        parent_item_id: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        page = await self.get_board_items_page(
            board_id, item_type, parent_item_id, cursor, limit
        )
        return page.get("data", [])

    async def get_item(self, board_id: str, item_id: str) -> Dict[str, Any]:
        return await self._get(f"/boards/{board_id}/items/{item_id}")

    async def update_item(
        self, board_id: str, item_id: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Patch an item through the endpoint that matches its type.

        The item is read first because Miro rejects type-specific payloads
        sent to the wrong sub-resource.
        """
        item = await self.get_item(board_id, item_id)
        return await self.update_typed_item(board_id, item.get("type", ""), item_id, data)

    async def update_typed_item(
        self, board_id: str, item_type: str, item_id: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        endpoint = ITEM_TYPE_ENDPOINTS.get(item_type)
        if endpoint is None:
            raise UnsupportedItemTypeError(item_type)
        return await self._patch(f"/boards/{board_id}/{endpoint}/{item_id}", data)

    async def delete_item(self, board_id: str, item_id: str) -> Dict[str, Any]:
        return await self._delete(f"/boards/{board_id}/items/{item_id}")

    async def search_items(self, board_id: str, query: str) -> List[Dict[str, Any]]:
        response = await self._get(f"/boards/{board_id}/items", params={"query": query})
        return response.get("data", [])

    # ─── Item Creation ───────────────────────────────────────────────────────

    async def create_item(self, board_id: str, spec: ItemSpec) -> Dict[str, Any]:
        return await self._post(f"/boards/{board_id}/{spec.endpoint}", spec.to_payload())

    async def create_sticky_note(
        self,
        board_id: str,
        content: str,
        color: str = "yellow",
        position: Optional[Position] = None,
        parent_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        spec = StickyNoteSpec(
            data=StickyNoteData(content=content),
            style=StickyNoteStyle(fill_color=color),
            position=position or Position(),
            parent=_parent(parent_id),
        )
        return await self.create_item(board_id, spec)

    async def create_text(
        self,
        board_id: str,
        content: str,
        position: Optional[Position] = None,
        style: Optional[TextStyle] = None,
        geometry: Optional[TextGeometry] = None,
        parent_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        spec = TextSpec(
            data=TextData(content=content),
            position=position or Position(),
            style=style or TextStyle(),
            geometry=geometry or TextGeometry(width=200),
            parent=_parent(parent_id),
        )
        return await self.create_item(board_id, spec)

    async def create_shape(
        self,
        board_id: str,
        shape: str = "rectangle",
        content: Optional[str] = None,
        position: Optional[Position] = None,
        geometry: Optional[Geometry] = None,
        style: Optional[ShapeStyle] = None,
        parent_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        spec = ShapeSpec(
            data=ShapeData(shape=shape, content=content),
            position=position or Position(),
            geometry=geometry or Geometry(width=200, height=200, rotation=0),
            style=style or ShapeStyle(),
            parent=_parent(parent_id),
        )
        return await self.create_item(board_id, spec)

    async def create_card(
        self,
        board_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
        position: Optional[Position] = None,
        parent_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        spec = CardSpec(
            data=CardData(title=title or None, description=description or None),
            position=position or Position(),
            parent=_parent(parent_id),
        )
        return await self.create_item(board_id, spec)

    async def create_frame(
        self,
        board_id: str,
        title: Optional[str] = None,
        position: Optional[Position] = None,
        geometry: Optional[Geometry] = None,
    ) -> Dict[str, Any]:
        spec = FrameSpec(
            data=FrameData(title=title or None),
            position=position or Position(),
            geometry=geometry or Geometry(width=400, height=300),
        )
        return await self.create_item(board_id, spec)

    async def create_image(
        self,
        board_id: str,
        url: str,
        position: Optional[Position] = None,
        geometry: Optional[Geometry] = None,
        parent_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        spec = ImageSpec(
            data=UrlData(url=url),
            position=position or Position(),
            geometry=geometry or Geometry(width=200, height=200),
            parent=_parent(parent_id),
        )
        return await self.create_item(board_id, spec)

    async def create_document(
        self,
        board_id: str,
        url: str,
        title: Optional[str] = None,
        position: Optional[Position] = None,
        parent_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        spec = DocumentSpec(
            data=UrlData(url=url, title=title or None),
            position=position or Position(),
            parent=_parent(parent_id),
        )
        return await self.create_item(board_id, spec)

    async def create_embed(
        self,
        board_id: str,
        url: str,
        position: Optional[Position] = None,
        geometry: Optional[Geometry] = None,
        parent_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        spec = EmbedSpec(
            data=EmbedData(url=url),
            position=position or Position(),
            geometry=geometry or Geometry(width=320, height=180),
            parent=_parent(parent_id),
        )
        return await self.create_item(board_id, spec)

    async def create_connector(self, board_id: str, spec: ConnectorSpec) -> Dict[str, Any]:
        return await self._post(f"/boards/{board_id}/connectors", spec.to_payload())

    # ─── Frames ──────────────────────────────────────────────────────────────

    async def get_frames(self, board_id: str) -> List[Dict[str, Any]]:
        return await self.get_board_items(board_id, item_type="frame")

    async def get_items_in_frame(self, board_id: str, frame_id: str) -> List[Dict[str, Any]]:
        return await self.get_board_items(board_id, parent_item_id=frame_id)

    # ─── Tags ────────────────────────────────────────────────────────────────

    async def get_tags(self, board_id: str) -> List[Dict[str, Any]]:
        response = await self._get(f"/boards/{board_id}/tags")
        return response.get("data", [])

    async def create_tag(
        self, board_id: str, title: str, fill_color: str = TagColor.RED.value
    ) -> Dict[str, Any]:
        return await self._post(
            f"/boards/{board_id}/tags", {"title": title, "fillColor": fill_color}
        )

    async def update_tag(
        self,
        board_id: str,
        tag_id: str,
        title: Optional[str] = None,
        fill_color: Optional[str] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if title is not None:
            body["title"] = title
        if fill_color is not None:
            body["fillColor"] = fill_color
        return await self._patch(f"/boards/{board_id}/tags/{tag_id}", body)

    async def delete_tag(self, board_id: str, tag_id: str) -> Dict[str, Any]:
        return await self._delete(f"/boards/{board_id}/tags/{tag_id}")

    async def attach_tag_to_item(self, board_id: str, item_id: str, tag_id: str) -> Dict[str, Any]:
        return await self._post(f"/boards/{board_id}/items/{item_id}/tags/{tag_id}")

    async def remove_tag_from_item(self, board_id: str, item_id: str, tag_id: str) -> Dict[str, Any]:
        return await self._delete(f"/boards/{board_id}/items/{item_id}/tags/{tag_id}")

    # ─── Groups ──────────────────────────────────────────────────────────────

    async def create_group(
        self,
        board_id: str,
        item_ids: List[str],
        title: Optional[str] = None,
        style: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"itemIds": item_ids, "style": style or {"fillColor": "#ffffff"}}
        if title:
            body["data"] = {"title": title}
        return await self._post(f"/boards/{board_id}/groups", body)

    async def update_group(
        self, board_id: str, group_id: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self._patch(f"/boards/{board_id}/groups/{group_id}", data)

    async def delete_group(self, board_id: str, group_id: str) -> Dict[str, Any]:
        return await self._delete(f"/boards/{board_id}/groups/{group_id}")

    # ─── Members ─────────────────────────────────────────────────────────────

    async def get_board_members(self, board_id: str) -> List[Dict[str, Any]]:
        response = await self._get(f"/boards/{board_id}/members")
        return response.get("data", [])

    async def share_board_with_user(
        self, board_id: str, email: str, role: str, message: Optional[str] = None
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"email": email, "role": role}
        if message:
            body["message"] = message
        return await self._post(f"/boards/{board_id}/members", body)

    async def update_board_member(
        self, board_id: str, member_id: str, role: str
    ) -> Dict[str, Any]:
        return await self._patch(f"/boards/{board_id}/members/{member_id}", {"role": role})

    async def remove_board_member(self, board_id: str, member_id: str) -> Dict[str, Any]:
        return await self._delete(f"/boards/{board_id}/members/{member_id}")

    # ─── Webhooks ────────────────────────────────────────────────────────────

    async def create_webhook(
        self, callback_url: str, board_id: str, events: List[str]
    ) -> Dict[str, Any]:
        return await self._post(
            "/webhooks",
            {"callbackUrl": callback_url, "boardId": board_id, "events": events},
        )

    async def get_webhooks(self) -> List[Dict[str, Any]]:
        response = await self._get("/webhooks")
        return response.get("data", [])

    async def update_webhook(
        self,
        webhook_id: str,
        callback_url: Optional[str] = None,
        events: Optional[List[str]] = None,
        status: Optional[str] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if callback_url is not None:
            body["callbackUrl"] = callback_url
        if events is not None:
            body["events"] = events
        if status is not None:
            body["status"] = status
        return await self._patch(f"/webhooks/{webhook_id}", body)

    async def delete_webhook(self, webhook_id: str) -> Dict[str, Any]:
        return await self._delete(f"/webhooks/{webhook_id}")
