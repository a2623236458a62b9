"""
Multipart form for the Diawi upload endpoint.

The wire order of the parts is the order of the list returned by
``build_upload_fields``; ``encode_fields`` only turns each descriptor into an
httpx multipart entry.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Any, List, Tuple

from config.constants import CONTENT_TYPE_MAP, DEFAULT_CONTENT_TYPE, FormField
from diawi.models import UploadRequest


class FieldKind(Enum):
    TEXT = "text"
    FILE = "file"
    LIST = "list"
    BOOL = "bool"


@dataclass(frozen=True)
class FieldDescriptor:
    """One multipart part: name, kind and raw value."""
    name: str
    kind: FieldKind
    value: Any


def guess_content_type(path: str) -> str:
    return CONTENT_TYPE_MAP.get(Path(path).suffix.lower(), DEFAULT_CONTENT_TYPE)


def build_upload_fields(req: UploadRequest) -> List[FieldDescriptor]:
    """
    Ordered descriptors for an upload request.

    file, token, password, comment, callback_url, callback_emails (only when
    set), then find_by_udid, wall_of_apps, installation_notifications (always).
    """
    fields = [
        FieldDescriptor(FormField.FILE.value, FieldKind.FILE, req.file),
        FieldDescriptor(FormField.TOKEN.value, FieldKind.TEXT, req.token),
    ]

    optional_text = [
        (FormField.PASSWORD, req.password),
        (FormField.COMMENT, req.comment),
        (FormField.CALLBACK_URL, req.callback_url),
    ]
    for name, value in optional_text:
        if value:
            fields.append(FieldDescriptor(name.value, FieldKind.TEXT, value))

    if req.callback_emails:
        fields.append(
            FieldDescriptor(FormField.CALLBACK_EMAILS.value, FieldKind.LIST, list(req.callback_emails))
        )

    fields.extend([
        FieldDescriptor(FormField.FIND_BY_UDID.value, FieldKind.BOOL, req.find_by_udid),
        FieldDescriptor(FormField.WALL_OF_APPS.value, FieldKind.BOOL, req.wall_of_apps),
        FieldDescriptor(FormField.INSTALLATION_NOTIFICATIONS.value, FieldKind.BOOL, req.installation_notifications),
    ])
    return fields


def encode_value(descriptor: FieldDescriptor) -> str:
    """Text form of a non-file field as Diawi expects it."""
    if descriptor.kind is FieldKind.BOOL:
        return "1" if descriptor.value else "0"
    if descriptor.kind is FieldKind.LIST:
        return ",".join(descriptor.value)
    return str(descriptor.value)


def encode_fields(fields: List[FieldDescriptor], fileobj: BinaryIO) -> List[Tuple[str, tuple]]:
    """
    Convert descriptors into an httpx ``files`` list.

    Everything goes through ``files`` because httpx writes ``data`` entries
    before ``files`` ones; a ``None`` filename renders a plain form field.

    Args:
        fields: Output of build_upload_fields
        fileobj: Open binary handle for the FILE descriptor

    Returns:
        List of (name, (filename, content[, content_type])) tuples
    """
    parts = []
    for descriptor in fields:
        if descriptor.kind is FieldKind.FILE:
            filename = Path(descriptor.value).name
            parts.append(
                (descriptor.name, (filename, fileobj, guess_content_type(descriptor.value)))
            )
        else:
            parts.append((descriptor.name, (None, encode_value(descriptor).encode("utf-8"))))
    return parts
