"""Revue request and response payloads.

The service speaks PascalCase on the way in ({"Title", "Url", "Description"})
and camelCase on the way out ({"msg", "revueId", ...}), so response keys are
matched case-insensitively.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.revue_client.errors import UnexpectedResponseError


@dataclass
class RevueDTO:
    """Body of a create or edit request.

    Attributes:
        title: Revue title (required by the service)
        url: Optional image URL; the service accepts an empty string
        description: Revue description (required by the service)
    """
    title: str
    description: str
    url: str = ""

    def to_payload(self) -> Dict[str, str]:
        """Serialise to the JSON object the API expects."""
        return {
            'Title': self.title,
            'Url': self.url,
            'Description': self.description,
        }

    @classmethod
    def empty(cls) -> "RevueDTO":
        """Payload with every field blank (fails server-side validation)."""
        return cls(title="", description="", url="")

    @classmethod
    def unique(cls, prefix: str, description: str) -> "RevueDTO":
        """Payload whose title is made unique with a random hex suffix."""
        return cls(title=f"{prefix} {uuid.uuid4().hex}", description=description)


@dataclass
class ApiResponseDTO:
    """A response object returned by the Revue endpoints.

    Create/edit/delete return {"msg": ...}; the listing returns an array of
    revue objects carrying "revueId". Every field is optional.
    """
    msg: Optional[str] = None
    revue_id: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    _KEYS = {
        'msg': 'msg',
        'revueid': 'revue_id',
        'title': 'title',
        'url': 'url',
        'description': 'description',
    }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ApiResponseDTO":
        """Build from a decoded JSON object, matching keys case-insensitively."""
        known: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in data.items():
            attr = cls._KEYS.get(key.lower())
            if attr is None:
                extra[key] = value
            elif attr == 'revue_id' and value is not None:
                known[attr] = str(value)
            else:
                known[attr] = value
        return cls(extra=extra, **known)

    @classmethod
    def list_from_json(cls, data: Any, endpoint: str = "unknown", status_code: int = 200) -> List["ApiResponseDTO"]:
        """Build a list from a decoded JSON array.

        Raises:
            UnexpectedResponseError: If data is not a list of JSON objects
        """
        if not isinstance(data, list):
            raise UnexpectedResponseError(endpoint, status_code, "expected a JSON array")
        items = []
        for item in data:
            if not isinstance(item, dict):
                raise UnexpectedResponseError(endpoint, status_code, "array item is not a JSON object")
            items.append(cls.from_dict(item))
        return items
